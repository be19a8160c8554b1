"""CSS color function format, e.g. 'rgb(255, 128, 0)' or 'rgba(255, 128, 0, 0.5)'."""

import re
from typing import Any

from tweakui.models import RGBA
from tweakui.utils import to_byte

from .base import ColorFormat, finite_or_zero, new_channels
from .descriptor import FormatKind

_WRAPPER = re.compile(r"[rgba()]", re.IGNORECASE)


def format_alpha(alpha: float) -> str:
    """Write alpha unrounded, without a trailing '.0' for whole numbers."""
    alpha = float(alpha)
    if alpha.is_integer():
        return str(int(alpha))
    return repr(alpha)


class CssStringFormat(ColorFormat):
    """
    CSS ``rgb()`` / ``rgba()`` function string.

    Color channels are written as rounded 0-255 integers, alpha as an
    unrounded number in [0, 1]. The function name is the channel letters,
    so the descriptor 'rgba()' writes 'rgba(...)'.
    """

    kind = FormatKind.CSS_STRING

    @property
    def descriptor(self) -> str:
        return "".join(self.components) + "()"

    def parse_strict(self, value: Any) -> RGBA:
        if value is None:
            value = "rgba(0, 0, 0)"
        if not isinstance(value, str):
            raise self._fail(value, f"expected a string, got {type(value).__name__}")

        parts = [part.strip() for part in _WRAPPER.sub("", value).split(",")]
        numbers: list[float | None] = []
        for part in parts:
            try:
                number = float(part)
            except ValueError:
                numbers.append(None)
                continue
            numbers.append(finite_or_zero(number))

        if value.strip() and all(number is None for number in numbers):
            raise self._fail(value, "no numeric channel values found")

        channels = new_channels()
        for i, key in enumerate(self.components):
            number = numbers[i] if i < len(numbers) else None
            if number is not None:
                channels[key] = number if key == "a" else number / 255
        return RGBA(**channels)

    def format(self, rgba: RGBA) -> str:
        values = [
            format_alpha(rgba[key]) if key == "a" else str(to_byte(rgba[key]))
            for key in self.components
        ]
        return "".join(self.components) + "(" + ", ".join(values) + ")"
