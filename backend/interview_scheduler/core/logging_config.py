from __future__ import annotations

import logging
import sys

from interview_scheduler.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Install a single stdout handler on the package logger."""
    logger = logging.getLogger("interview_scheduler")
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    if logger.handlers:
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
