from monadic.api import main

raise SystemExit(main())
