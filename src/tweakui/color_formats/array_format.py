"""List color format, e.g. [255, 128, 0] for '[]rgb' or [1.0, 0.5, 0.0] for '[n]rgb'."""

from collections.abc import Sequence
from typing import Any

from tweakui.models import RGBA
from tweakui.utils import to_byte

from .base import ColorFormat, new_channels, to_number
from .descriptor import FormatKind


class ArrayColorFormat(ColorFormat):
    """
    Channels stored positionally in a list.

    Color channels are 0-255 numbers, or [0, 1] when ``normalized`` is set.
    Alpha is always in [0, 1], whatever the flag says.
    """

    kind = FormatKind.ARRAY

    def __init__(self, components: Sequence[str], normalized: bool = False):
        super().__init__(components)
        self.normalized = normalized

    @property
    def descriptor(self) -> str:
        return ("[n]" if self.normalized else "[]") + "".join(self.components)

    def parse_strict(self, value: Any) -> RGBA:
        if value is None:
            value = []
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise self._fail(value, f"expected a list, got {type(value).__name__}")

        scale = 1 if self.normalized else 255
        channels = new_channels()
        for i, key in enumerate(self.components[:len(value)]):
            raw = to_number(value[i])
            channels[key] = raw if key == "a" else raw / scale
        return RGBA(**channels)

    def format(self, rgba: RGBA) -> list[float | int]:
        return [
            rgba[key] if self.normalized or key == "a" else to_byte(rgba[key])
            for key in self.components
        ]
