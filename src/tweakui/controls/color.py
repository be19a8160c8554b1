"""Color control model and editing state.

A color control stores its value in whatever representation its ``format``
descriptor names. The swatch shows `describe_color_value` of the raw value
and `rgba_to_css` of the parsed color; the picker edits a `ColorEditor`,
which keeps hue, saturation and value separately so that dragging through
gray does not lose the hue.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import Field, field_validator

from tweakui.binding import ValueSource, get_value, set_value
from tweakui.color_formats import (
    ColorFormatRegistry,
    FormatDescriptor,
    format_color,
    get_color_format,
    hsva_to_rgba,
    parse_color,
    rgba_to_hsva,
)
from tweakui.models import HSVA, RGBA, validate_format_text
from tweakui.utils import clamp

logger = logging.getLogger(__name__)


class ColorControl(ValueSource):
    """A bound color value plus the format it is stored in."""

    label: str | None = Field(default=None, description="Label shown next to the swatch")
    format: str = Field(default="rgb", description="Color format descriptor of the stored value")

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        return validate_format_text(v)

    @property
    def descriptor(self) -> FormatDescriptor:
        return FormatDescriptor.parse(self.format)

    @property
    def has_alpha(self) -> bool:
        """Whether the stored format carries an alpha channel."""
        return self.descriptor.has_alpha

    def rgba(self, registry: ColorFormatRegistry | None = None) -> RGBA:
        """Parse the current value (lenient)."""
        return parse_color(get_value(self), self.format, registry)

    def write_rgba(self, rgba: RGBA, registry: ColorFormatRegistry | None = None) -> Any:
        """
        Format a color and write it back.

        Returns:
            The value as stored
        """
        return set_value(self, format_color(rgba, self.format, registry))


class ColorEditor:
    """
    Editing state of a color picker.

    Holds the color as HSV plus alpha. Hue is in degrees [0, 360],
    saturation, value and alpha in [0, 1].

    Example:
        ```python
        editor = ColorEditor.for_control(control)
        editor.set_hsv(s=0.8, v=0.9)       # drag in the saturation/value plane
        editor.set_hsv(h=200)              # drag on the hue bar
        stored = editor.write(control)     # formatted in control.format
        ```
    """

    def __init__(
        self,
        descriptor: str = "rgb",
        registry: ColorFormatRegistry | None = None,
    ):
        """
        Initialize an editor showing opaque black.

        Args:
            descriptor: Format the edited value is read from and written in
            registry: Registry used to resolve formats (defaults to the shared one)
        """
        self.descriptor = descriptor
        self._registry = registry
        self.hue = 0.0
        self.saturation = 0.0
        self.value = 0.0
        self.alpha = 1.0

    @classmethod
    def for_control(
        cls, control: ColorControl, registry: ColorFormatRegistry | None = None
    ) -> "ColorEditor":
        """Create an editor loaded with the control's current value."""
        editor = cls(control.format, registry)
        editor.load(get_value(control))
        return editor

    @property
    def has_alpha(self) -> bool:
        return FormatDescriptor.parse(self.descriptor).has_alpha

    def load(self, raw: Any, descriptor: str | None = None) -> RGBA:
        """
        Load a stored value.

        Args:
            raw: Value in the editor's format (or ``descriptor`` if given)
            descriptor: Format of ``raw`` when it differs from the editor's

        Returns:
            The parsed color
        """
        rgba = parse_color(raw, descriptor or self.descriptor, self._registry)
        self.load_rgba(rgba)
        return rgba

    def load_rgba(self, rgba: RGBA) -> None:
        hsva = rgba_to_hsva(rgba)
        self.hue = hsva.h
        self.saturation = hsva.s
        self.value = hsva.v
        self.alpha = hsva.a

    def set_hsv(
        self,
        h: float | None = None,
        s: float | None = None,
        v: float | None = None,
    ) -> None:
        """Update any of hue, saturation and value; out of range input is clamped."""
        if h is not None:
            self.hue = clamp(h, 0.0, 360.0)
        if s is not None:
            self.saturation = clamp(s, 0.0, 1.0)
        if v is not None:
            self.value = clamp(v, 0.0, 1.0)

    def set_alpha(self, a: float) -> None:
        self.alpha = clamp(a, 0.0, 1.0)

    def set_channel(self, key: str, byte: int | str) -> None:
        """
        Set one color channel from a 0-255 entry field.

        Args:
            key: 'r', 'g' or 'b'
            byte: The typed value; clamped to 0-255
        """
        if key not in ("r", "g", "b"):
            raise KeyError(key)
        try:
            number = int(byte)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring non-numeric {key} channel entry {byte!r}")
            return

        rgba = self.rgba().with_channel(key, clamp(number, 0, 255) / 255)
        alpha = self.alpha
        self.load_rgba(rgba)
        self.alpha = alpha

    def set_hex(self, text: str) -> None:
        """Set the color from a typed hex string, e.g. '#f80' or 'ff8000cc'."""
        self.load(text, "rgba" if self.has_alpha else "rgb")

    def hsva(self) -> HSVA:
        return HSVA(h=self.hue, s=self.saturation, v=self.value, a=self.alpha)

    def rgba(self) -> RGBA:
        return hsva_to_rgba(self.hsva())

    def hex(self) -> str:
        """Hex text for the entry field, with alpha when the format has it."""
        return get_color_format("#rgba" if self.has_alpha else "#rgb", self._registry).format(self.rgba())

    def css(self, alpha: float | None = None) -> str:
        """CSS preview color of the current state."""
        return rgba_to_css(self.rgba(), alpha)

    def output(self, descriptor: str | None = None) -> Any:
        """Format the current color in the editor's format (or ``descriptor``)."""
        return format_color(self.rgba(), descriptor or self.descriptor, self._registry)

    def write(self, source: Any) -> Any:
        """
        Write the current color to a source in the editor's format.

        Returns:
            The value as stored
        """
        return set_value(source, self.output())

    def __repr__(self) -> str:
        return (
            f"ColorEditor(h={self.hue:.1f}, s={self.saturation:.3f}, "
            f"v={self.value:.3f}, a={self.alpha:.3f}, format={self.descriptor!r})"
        )


def rgba_to_css(rgba: RGBA, alpha: float | None = None) -> str:
    """
    CSS ``rgba()`` string for a swatch.

    Args:
        rgba: The color
        alpha: Alpha to show instead of the color's own (e.g. 1 for an opaque swatch)

    Example:
        >>> rgba_to_css(RGBA(r=1.0, g=0.5, b=0.0, a=0.25), alpha=1)
        'rgba(255, 128, 0, 1)'
    """
    if alpha is not None:
        rgba = rgba.with_channel("a", alpha)
    return get_color_format("rgba()").format(rgba)


def describe_color_value(value: Any) -> str:
    """
    Short text for a raw color value, shown on the swatch button.

    Example:
        >>> describe_color_value(0xff8000)
        '0x00ff8000'
        >>> describe_color_value([1.0, 0.5, 0.25])
        '1 , 0.50 , 0.25'
    """
    if value is None:
        return "null"
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "?"
    if isinstance(value, int) or (isinstance(value, float) and value.is_integer()):
        return "0x" + format(int(value), "08x")
    if isinstance(value, Mapping):
        return " ".join(f"{key}: {_channel_text(it)}" for key, it in value.items())
    if isinstance(value, Sequence):
        return " , ".join(_channel_text(it) for it in value)
    return "?"


def _channel_text(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return str(value)
    if 0 < value < 1:
        return f"{value:.2f}"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
