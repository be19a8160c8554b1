"""Hex string color format, e.g. '#ff8000' or '#ff800080'."""

import re
from typing import Any

from tweakui.models import RGBA
from tweakui.utils import clamp, to_byte

from .base import ColorFormat, new_channels
from .descriptor import FormatKind

_HEX_DIGITS = re.compile(r"[0-9a-f]+", re.IGNORECASE)


class HexStringFormat(ColorFormat):
    """
    Hex string with two digits per channel.

    The leading '#' is optional on input and always written on output.
    Shorthand input with one digit per channel ('#f80') is expanded by
    doubling each digit. Alpha is encoded as a byte like the other channels.
    """

    kind = FormatKind.HEX_STRING

    @property
    def descriptor(self) -> str:
        return "#" + "".join(self.components)

    def parse_strict(self, value: Any) -> RGBA:
        if value is None:
            value = "#000"
        if not isinstance(value, str):
            raise self._fail(value, f"expected a string, got {type(value).__name__}")

        match = _HEX_DIGITS.search(value)
        if match is None:
            raise self._fail(value, "no hex digits found")

        digits = match.group(0)
        if len(digits) == len(self.components):
            digits = "".join(digit * 2 for digit in digits)

        channels = new_channels()
        for i, key in enumerate(self.components):
            pair = digits[i * 2:i * 2 + 2]
            if pair:
                channels[key] = int(pair, 16) / 255
        return RGBA(**channels)

    def format(self, rgba: RGBA) -> str:
        return "#" + "".join(
            f"{clamp(to_byte(rgba[key]), 0, 255):02x}" for key in self.components
        )
