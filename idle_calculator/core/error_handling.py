"""
Error kinds and input normalization helpers.

Nothing in the calculator is fatal: an invalid item index is ignored and an
invalid setting value falls back to 0. These helpers log the problem and
return the corrected value, or raise for inputs a caller must not send.
"""

import math
from enum import Enum
from typing import Any, Optional

from catchery import log_warning


class ErrorKind(Enum):
    """Enumeration of the recoverable errors the store can meet."""

    INVALID_INDEX = "invalid_index"
    INVALID_SETTING = "invalid_setting"


def normalize_setting_value(
    value: Any, param_name: str, context: Optional[dict[str, Any]] = None
) -> int:
    """
    Converts a settings form value into an integer, falling back to 0.

    None, non-numeric text, booleans and non-finite numbers become 0.
    Numeric strings are parsed, floats are truncated.

    Args:
        value: The raw value typed into the settings form.
        param_name: Name of the setting, for logging.
        context: Additional context for logging.

    Returns:
        int: The normalized value.

    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    try:
        if isinstance(value, bool):
            raise TypeError("booleans are not setting values")
        number = float(value.strip()) if isinstance(value, str) else float(value)
        if not math.isfinite(number):
            raise ValueError(f"non-finite value {number}")
        return int(number)
    except (TypeError, ValueError) as e:
        log_warning(
            f"{param_name} must be numeric, got: {value!r}, correcting to 0",
            {
                **(context or {}),
                "kind": ErrorKind.INVALID_SETTING.value,
                "param_name": param_name,
                "error": str(e),
            },
        )
        return 0


def require_non_negative_int(
    value: Any, param_name: str, context: Optional[dict[str, Any]] = None
) -> int:
    """
    Validates that a value is a non-negative integer.

    Args:
        value: The value to validate.
        param_name: Human-readable parameter name for error messages.
        context: Additional context for logging.

    Returns:
        int: The validated value.

    Raises:
        ValueError: If validation fails.

    """
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        log_warning(
            f"{param_name} must be a non-negative integer, got: {value!r}",
            {
                **(context or {}),
                "param_name": param_name,
                "type": type(value).__name__,
            },
        )
        raise ValueError(f"Invalid {param_name}: {value!r}")
    return value


def is_valid_index(index: Any, length: int) -> bool:
    """Returns True if index addresses an element of a list of that length."""
    return (
        isinstance(index, int)
        and not isinstance(index, bool)
        and 0 <= index < length
    )
