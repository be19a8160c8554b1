"""Configuration-related exceptions.

This module defines exceptions for configuration errors:
- ConfigurationError: Base class for configuration errors
- ConfigValidationError: Config values fail validation
"""

from typing import Any

from .base import TweakUIError


class ConfigurationError(TweakUIError):
    """Panel or control configuration is invalid."""
    pass


class ConfigValidationError(ConfigurationError):
    """Configuration values fail validation."""

    def __init__(self, field: str, value: Any, error_msg: str, source: str | None = None):
        """
        Initialize config validation error.

        Args:
            field: The configuration field that failed validation
            value: The invalid value
            error_msg: Why the value is invalid
            source: Where the configuration came from (optional)
        """
        user_msg = f"Invalid configuration value for '{field}': {error_msg}"

        recovery = f"Update the '{field}' value in your configuration"
        if source:
            recovery += f"\nConfiguration source: {source}"

        if "format" in field.lower():
            recovery += "\nColor formats combine r, g, b, a with an optional '#', '0x', '()', '[]', '[n]', '{}' or '{n}'"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Config validation failed for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint=recovery
        )
        self.field = field
        self.value = value
        self.error_msg = error_msg
        self.source = source
