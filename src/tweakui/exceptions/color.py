"""Color format exceptions.

- ColorFormatError: Base class for color format errors
- ColorParseError: A color value could not be parsed by a codec
- FormatDescriptorError: A format descriptor names no color channels
"""

from typing import Any

from .base import TweakUIError


class ColorFormatError(TweakUIError):
    """A color value or format descriptor is invalid."""
    pass


class ColorParseError(ColorFormatError):
    """A codec could not make sense of its input value."""

    def __init__(self, value: Any, descriptor: str, reason: str):
        """
        Initialize color parse error.

        Args:
            value: The raw value that failed to parse
            descriptor: Format descriptor of the codec (e.g. '#rgb')
            reason: Why the value was rejected
        """
        super().__init__(
            user_message=f"Cannot read {value!r} as a '{descriptor}' color",
            technical_message=f"Parse of {value!r} with format '{descriptor}' failed: {reason}",
            recoverable=True,
            recovery_hint=_hint_for(descriptor),
        )
        self.value = value
        self.descriptor = descriptor
        self.reason = reason


class FormatDescriptorError(ColorFormatError):
    """Format descriptor does not contain any of the letters r, g, b, a."""

    def __init__(self, descriptor: str):
        """
        Initialize format descriptor error.

        Args:
            descriptor: The offending descriptor string
        """
        super().__init__(
            user_message=f"Color format '{descriptor}' does not name any color channel",
            technical_message=f"No [rgba] letters found in format descriptor {descriptor!r}",
            recoverable=True,
            recovery_hint="Use a combination of the letters r, g, b and a, e.g. 'rgb' or '[n]rgba'",
        )
        self.descriptor = descriptor


def _hint_for(descriptor: str) -> str:
    if "[" in descriptor:
        return "Expected a list of channel values, e.g. [255, 128, 0]"
    if "{" in descriptor:
        return "Expected a mapping keyed by channel letter, e.g. {'r': 255, 'g': 128, 'b': 0}"
    if "0x" in descriptor:
        return "Expected an integer, e.g. 0xff8000"
    if "()" in descriptor:
        return "Expected a CSS color function, e.g. rgb(255, 128, 0)"
    return "Expected a hex string, e.g. #ff8000 or #f80"
