"""
Validation and error handling for the welc package.

This module provides the exception hierarchy, consistent error logging
helpers and the validators used for configuration and CLI input.
"""

# Core exception classes and error handling
from .exceptions import (
    CommandError,
    ErrorSeverity,
    HeaderParseError,
    ValidationError,
    WelcError,
    WevtutilParseError,
    handle_cli_error,
    handle_config_error,
    handle_error,
    handle_file_error,
    handle_subprocess_error,
)

# Validation functions
from .validators import (
    validate_boolean,
    validate_computer_name,
    validate_enum_choice,
    validate_path_exists,
    validate_positive_float,
    validate_positive_integer,
)

__all__ = [
    # Core functionality
    "CommandError",
    "ErrorSeverity",
    "HeaderParseError",
    "ValidationError",
    "WelcError",
    "WevtutilParseError",
    "handle_cli_error",
    "handle_config_error",
    "handle_error",
    "handle_file_error",
    "handle_subprocess_error",
    # Validators
    "validate_boolean",
    "validate_computer_name",
    "validate_enum_choice",
    "validate_path_exists",
    "validate_positive_float",
    "validate_positive_integer",
]
