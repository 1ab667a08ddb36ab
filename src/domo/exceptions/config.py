"""Configuration-related exceptions.

This module defines exceptions for settings errors:
- ConfigurationError: Base class for configuration errors
- ConfigFileInvalidError: Settings file has invalid syntax
- ConfigValidationError: Settings values fail validation
"""

from typing import Any, Optional

from .base import DomoError


class ConfigurationError(DomoError):
    """Settings are invalid or cannot be loaded."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """Settings file has invalid JSON syntax."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Initialize config file invalid error.

        Args:
            file_path: Path to the invalid settings file
            parse_error: The parsing error message
        """
        user_msg = "Settings file has invalid syntax"
        recovery = "Check for common JSON errors:\n"
        recovery += "  - Trailing commas (remove commas after last item)\n"
        recovery += "  - Missing quotes around strings\n"
        recovery += "  - Unclosed braces or brackets\n"
        recovery += f"  - Edit: {file_path}"

        if "trailing comma" in parse_error.lower():
            user_msg = "Settings file has a trailing comma"
            recovery = (
                f"Remove the trailing comma from {file_path}\n"
                "JSON doesn't allow commas after the last item in an object or array"
            )
        elif "empty" in parse_error.lower():
            user_msg = "Settings file is empty"
            recovery = f"Delete {file_path} to fall back to default settings"

        super().__init__(
            message=user_msg,
            detail=f"JSON parse error in {file_path}: {parse_error}",
            hint=recovery
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """Settings values fail validation."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        """
        Initialize config validation error.

        Args:
            field: The settings field that failed validation
            value: The invalid value
            error_msg: Why the value is invalid
            file_path: Path to the settings file (optional)
        """
        user_msg = f"Invalid settings value for '{field}': {error_msg}"

        recovery = f"Update the '{field}' value in your settings"
        if file_path:
            recovery += f"\nSettings file: {file_path}"

        if field == "observer_errors":
            recovery += "\nValid values: \"log\", \"raise\""

        super().__init__(
            message=user_msg,
            detail=f"Settings validation failed for {field}={value}: {error_msg}",
            hint=recovery
        )
        self.field = field
        self.value = value
        self.file_path = file_path
