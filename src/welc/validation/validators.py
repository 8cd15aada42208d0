"""
Validation functions for configuration values and command line arguments.
"""

import math
import os
import re
from pathlib import Path
from typing import Any, List, Optional, Union

from .exceptions import ValidationError

# NetBIOS names, DNS host names and IPv4/IPv6 literals.
_COMPUTER_NAME_RE = re.compile(r"^[A-Za-z0-9_.:\-]+$")


def validate_positive_integer(
    value: Any,
    min_value: int = 1,
    max_value: Optional[int] = None,
    field_name: str = "value"
) -> int:
    """
    Validate that a value is an integer within bounds.

    Args:
        value: Value to validate
        min_value: Minimum allowed value (inclusive)
        max_value: Maximum allowed value (inclusive), None for no limit
        field_name: Name of the field being validated

    Returns:
        Validated integer value

    Raises:
        ValidationError: If validation fails
    """
    if isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be a valid integer, got {value}",
            field_name=field_name,
            value=value
        )
    try:
        int_value = int(value)
    except (ValueError, TypeError):
        raise ValidationError(
            f"{field_name} must be a valid integer, got {value}",
            field_name=field_name,
            value=value
        )
    if int_value < min_value:
        raise ValidationError(
            f"{field_name} must be >= {min_value}, got {int_value}",
            field_name=field_name,
            value=value
        )
    if max_value is not None and int_value > max_value:
        raise ValidationError(
            f"{field_name} must be <= {max_value}, got {int_value}",
            field_name=field_name,
            value=value
        )
    return int_value


def validate_positive_float(
    value: Any,
    min_value: float = 0.0,
    max_value: Optional[float] = None,
    field_name: str = "value"
) -> float:
    """
    Validate that a value is a number within bounds.

    Raises:
        ValidationError: If validation fails
    """
    if isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be a valid number, got {value}",
            field_name=field_name,
            value=value
        )
    try:
        float_value = float(value)
    except (ValueError, TypeError):
        raise ValidationError(
            f"{field_name} must be a valid number, got {value}",
            field_name=field_name,
            value=value
        )
    if math.isnan(float_value):
        raise ValidationError(
            f"{field_name} must be a number, got NaN",
            field_name=field_name,
            value=value
        )
    if float_value < min_value:
        raise ValidationError(
            f"{field_name} must be >= {min_value}, got {float_value}",
            field_name=field_name,
            value=value
        )
    if max_value is not None and float_value > max_value:
        raise ValidationError(
            f"{field_name} must be <= {max_value}, got {float_value}",
            field_name=field_name,
            value=value
        )
    return float_value


def validate_enum_choice(
    value: Any,
    valid_choices: List[str],
    field_name: str = "value",
    case_sensitive: bool = True
) -> str:
    """
    Validate that a value is one of the allowed choices.

    When `case_sensitive` is False the matching entry of `valid_choices` is
    returned, so "info" validates to "INFO".

    Raises:
        ValidationError: If value is not in choices
    """
    str_value = str(value)

    if case_sensitive:
        if str_value in valid_choices:
            return str_value
    else:
        for choice in valid_choices:
            if choice.lower() == str_value.lower():
                return choice

    raise ValidationError(
        f"{field_name} must be one of {valid_choices}, got {value}",
        field_name=field_name,
        value=value
    )


def validate_boolean(value: Any, field_name: str = "value") -> bool:
    """Validate that a value is a real boolean (TOML `true`/`false`)."""
    if not isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be a boolean, got {value!r}",
            field_name=field_name,
            value=value
        )
    return value


def validate_path_exists(path: Union[str, Path], field_name: str = "path") -> str:
    """
    Validate that a path exists.

    Returns:
        Validated path string

    Raises:
        ValidationError: If path doesn't exist
    """
    path_str = str(path)
    if not os.path.exists(path_str):
        raise ValidationError(
            f"{field_name} does not exist: {path_str}",
            field_name=field_name,
            value=path_str
        )
    return path_str


def validate_computer_name(name: Any, field_name: str = "computer_name") -> str:
    """
    Validate a host name passed to `wevtutil /r:`.

    Empty strings are allowed and stand for the local host.

    Raises:
        ValidationError: If the name contains characters a host name cannot
    """
    if not isinstance(name, str):
        raise ValidationError(
            f"{field_name} must be a string",
            field_name=field_name,
            value=name
        )
    name = name.strip()
    if name and not _COMPUTER_NAME_RE.match(name):
        raise ValidationError(
            f"{field_name} is not a valid host name: {name}",
            field_name=field_name,
            value=name
        )
    return name
