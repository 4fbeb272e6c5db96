"""Environment-driven settings."""

import logging
import os

from dotenv import load_dotenv

from .constants import DEFAULT_TIMEOUT_MS, TIMEOUT_ENV_VAR

load_dotenv()

logger = logging.getLogger(__name__)


def get_default_timeout_ms() -> int:
    """Request timeout in milliseconds, overridable through the environment."""
    raw = os.getenv(TIMEOUT_ENV_VAR)
    if not raw:
        return DEFAULT_TIMEOUT_MS
    try:
        value = int(float(raw))
    except ValueError:
        logger.warning("Ignoring invalid %s=%r", TIMEOUT_ENV_VAR, raw)
        return DEFAULT_TIMEOUT_MS
    if value <= 0:
        logger.warning("Ignoring non-positive %s=%r", TIMEOUT_ENV_VAR, raw)
        return DEFAULT_TIMEOUT_MS
    return value
