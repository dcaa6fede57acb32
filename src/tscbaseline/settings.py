"""Application-wide settings and environment loading."""

import logging
import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()
logger.debug("Environment variables loaded from .env if present")

DEFAULT_BASELINE_FILENAME = ".tsc-baseline.json"

_TRUTHY = {"1", "true", "yes", "on"}


@lru_cache(maxsize=1)
def get_default_baseline_path() -> str:
    """Return the baseline path configured in the environment, if any."""
    path = os.getenv("TSC_BASELINE_PATH")
    if path:
        logger.debug("Baseline path taken from environment", extra={"path": path})
        return path
    return DEFAULT_BASELINE_FILENAME


@lru_cache(maxsize=1)
def get_default_ignore_messages() -> Optional[bool]:
    """Return the identity mode configured in the environment, or None if unset."""
    value = os.getenv("TSC_BASELINE_IGNORE_MESSAGES")
    if value is None or not value.strip():
        return None
    enabled = value.strip().lower() in _TRUTHY
    logger.debug("Identity mode taken from environment", extra={"ignore_messages": enabled})
    return enabled
