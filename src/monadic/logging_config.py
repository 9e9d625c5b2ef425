from __future__ import annotations

import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

from loguru import logger

_CONFIGURED = False


def _level_filter(level: str) -> Callable[[dict], bool]:
    def _filter(record: dict) -> bool:
        return record["level"].name == level

    return _filter


def configure_logging(
    service: str = "monadic",
    version: str | None = None,
    environment: str | None = None,
) -> None:
    """
    Route monadic logs through loguru, once per process.

    By default each level gets its own JSON-lines file under
    MONADIC_LOG_DIR (default "logs"), in a per-day UTC directory, and
    INFO and above is echoed to stderr when it is a terminal.
    With MONADIC_DISABLE_FILE_LOGS=1 only the stderr sink is added.
    Every record carries service, version and env extras.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if version is None:
        version = os.getenv("MONADIC_VERSION", "0.1.0")
    if environment is None:
        environment = os.getenv("MONADIC_ENV", "dev")
    extra = {"service": service, "version": version, "env": environment}

    logger.remove()

    if os.getenv("MONADIC_DISABLE_FILE_LOGS") == "1":
        logger.add(sys.stderr, level="INFO", colorize=sys.stderr.isatty(), enqueue=False)
        logger.configure(extra=extra)
        _CONFIGURED = True
        return

    day_dir = Path(os.getenv("MONADIC_LOG_DIR", "logs")) / datetime.now(timezone.utc).strftime("%Y-%m-%d")
    day_dir.mkdir(parents=True, exist_ok=True)

    common_kwargs = {
        "serialize": True,
        "rotation": "10 MB",
        "retention": "30 days",
        "enqueue": True,
    }

    for level in ("DEBUG", "INFO", "ERROR"):
        logger.add(
            day_dir / f"{level.lower()}.json",
            level=level,
            filter=_level_filter(level),
            **common_kwargs,
        )

    if sys.stderr.isatty():
        logger.add(sys.stderr, level="INFO", colorize=True, enqueue=True)

    logger.configure(extra=extra)

    _CONFIGURED = True
