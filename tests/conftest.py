import os

os.environ.setdefault("MONADIC_DISABLE_FILE_LOGS", "1")
