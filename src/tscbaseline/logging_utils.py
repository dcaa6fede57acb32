"""Logging configuration utilities for TSC Baseline."""

import logging
import os
from typing import Optional

_LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
)


def configure_logging(level: Optional[str] = None, default: str = "WARNING") -> None:
    """Configure application-wide logging once."""
    if logging.getLogger().handlers:
        if level:
            logging.getLogger().setLevel(level.upper())
        return

    log_level = level or os.getenv("LOG_LEVEL", default)
    logging.basicConfig(level=log_level.upper(), format=_LOG_FORMAT)
