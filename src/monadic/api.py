from __future__ import annotations

import argparse
from typing import List, Optional

from loguru import logger

from monadic.core.laws import check_all
from monadic.demo.walkthrough import WalkthroughConfig, render_walkthrough, run_walkthrough
from monadic.logging_config import configure_logging


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="monadic",
        description="Walk through Functor, Applicative and Monad behaviour of Maybe",
    )
    parser.add_argument("--laws", dest="show_laws", action="store_true", help="Print the law report")
    parser.add_argument("--no-laws", dest="show_laws", action="store_false", help="Skip the law report")
    parser.add_argument("--indent", default=None, help="Prefix for each traced result")
    parser.set_defaults(show_laws=None)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    ns = _parse_args(argv)

    config = WalkthroughConfig.from_env()
    if ns.show_laws is not None:
        config.show_laws = ns.show_laws
    if ns.indent is not None:
        config.indent = ns.indent

    logger.info("monadic walkthrough invoked show_laws={show_laws}", show_laws=config.show_laws)
    print(render_walkthrough(run_walkthrough(), config))

    if not config.show_laws:
        logger.info("monadic walkthrough finished")
        return 0

    report = check_all()
    print()
    print(report)
    if not report.ok:
        logger.error("Law checks failed count={count}", count=len(report.failures))
        return 1
    logger.info("monadic walkthrough finished checks={count}", count=len(report.checks))
    return 0
