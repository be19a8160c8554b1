"""Mapping color format, e.g. {'r': 255, 'g': 128, 'b': 0} for '{}rgb'."""

from collections.abc import Mapping, Sequence
from typing import Any

from tweakui.models import RGBA
from tweakui.utils import to_byte

from .base import ColorFormat, new_channels, to_number
from .descriptor import FormatKind


class ObjectColorFormat(ColorFormat):
    """
    Channels stored in a mapping keyed by channel letter.

    Scaling follows `ArrayColorFormat`: 0-255 color channels unless
    ``normalized``, alpha always in [0, 1]. Missing keys keep their defaults
    (0 for colors, 1 for alpha).
    """

    kind = FormatKind.OBJECT

    def __init__(self, components: Sequence[str], normalized: bool = False):
        super().__init__(components)
        self.normalized = normalized

    @property
    def descriptor(self) -> str:
        return ("{n}" if self.normalized else "{}") + "".join(self.components)

    def parse_strict(self, value: Any) -> RGBA:
        if value is None:
            value = {}
        if not isinstance(value, Mapping):
            raise self._fail(value, f"expected a mapping, got {type(value).__name__}")

        scale = 1 if self.normalized else 255
        channels = new_channels()
        for key in self.components:
            if key not in value:
                continue
            raw = to_number(value[key])
            channels[key] = raw if key == "a" else raw / scale
        return RGBA(**channels)

    def format(self, rgba: RGBA) -> dict[str, float | int]:
        return {
            key: rgba[key] if self.normalized or key == "a" else to_byte(rgba[key])
            for key in self.components
        }
