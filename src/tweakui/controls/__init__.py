"""Control models built on the color and binding core."""

from .color import ColorControl, ColorEditor, describe_color_value, rgba_to_css

__all__ = [
    "ColorControl",
    "ColorEditor",
    "describe_color_value",
    "rgba_to_css",
]
