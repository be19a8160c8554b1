"""Packed integer color format, e.g. 0x0080ff for '0xrgb'."""

from typing import Any

from tweakui.models import RGBA
from tweakui.utils import clamp, to_byte

from .base import ColorFormat, new_channels
from .descriptor import FormatKind


class NumberColorFormat(ColorFormat):
    """
    Color packed into an integer, one byte per channel.

    The first channel of the descriptor occupies the lowest byte, so '0xrgb'
    stores red in bits 0-7 and blue in bits 16-23 (0x00bbggrr). Writing a
    literal such as 0x102030 therefore reads as r=0x30, g=0x20, b=0x10.
    Callers depend on this byte order; keep it.

    Strings are read as integer literals: a leading '#' means hex digits,
    a 0x, 0o or 0b prefix is honored, and anything else is decimal (so
    '0123' is 123 and 'ff' is rejected).
    """

    kind = FormatKind.NUMBER

    @property
    def descriptor(self) -> str:
        return "0x" + "".join(self.components)

    def parse_strict(self, value: Any) -> RGBA:
        if value is None:
            value = 0
        value = self._to_int(value)

        channels = new_channels()
        for i, key in enumerate(self.components):
            channels[key] = ((value >> (i * 8)) & 255) / 255
        return RGBA(**channels)

    def format(self, rgba: RGBA) -> int:
        packed = 0
        for i, key in enumerate(self.components):
            packed |= clamp(to_byte(rgba[key]), 0, 255) << (i * 8)
        return packed

    def _to_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise self._fail(value, "expected an integer, got bool")
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            return self._parse_literal(value)
        raise self._fail(value, f"expected an integer, got {type(value).__name__}")

    def _parse_literal(self, value: str) -> int:
        text = value.strip()
        try:
            if text.startswith("#"):
                return int(text[1:], 16)
            if text[:2].lower() in ("0x", "0o", "0b"):
                return int(text, 0)
            return int(text, 10)
        except ValueError:
            raise self._fail(value, "not an integer literal") from None
