"""
Argument validation shared by every connector.

Each validator raises ``AIConnectifyError`` with the caller-supplied message,
and returns nothing on success. Validators never touch the network.
"""

import math
import re
from typing import Any, Mapping

from ..config.constants import KEY_STRING_PATTERN
from ..errors import AIConnectifyError

_KEY_STRING_RE = re.compile(KEY_STRING_PATTERN)


def validate_string_input(value: Any, message: str) -> None:
    """Require a non-blank string."""
    if not isinstance(value, str) or not value.strip():
        raise AIConnectifyError(message)


def validate_array_input(value: Any, message: str) -> None:
    """Require a non-empty list or tuple."""
    if not isinstance(value, (list, tuple)):
        raise AIConnectifyError("This is not an array")
    if len(value) == 0:
        raise AIConnectifyError(message)


def validate_number_input(value: Any, message: str) -> None:
    """Require a finite int or float; booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise AIConnectifyError(message)
    if isinstance(value, float) and not math.isfinite(value):
        raise AIConnectifyError(message)


def validate_mapping_input(value: Any, message: str) -> None:
    if not isinstance(value, Mapping):
        raise AIConnectifyError(message)


def validate_key_string(value: Any, message: str) -> None:
    """Require a key-like token: 16-256 chars of letters, digits and ``-_.+=``."""
    if not isinstance(value, str) or not _KEY_STRING_RE.match(value):
        raise AIConnectifyError(message)
