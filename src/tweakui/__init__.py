"""tweakui: color formats and value binding for data-bound control panels."""

__version__ = "0.1.0"

# Color formats
from .color_formats import ColorFormatRegistry, format_color, get_color_format, parse_color

# Binding
from .binding import BoundValue, ValueSource, get_value, set_value

# Controls
from .context import PanelContext
from .controls import ColorControl, ColorEditor

__all__ = [
    "BoundValue",
    "ColorControl",
    "ColorEditor",
    "ColorFormatRegistry",
    "PanelContext",
    "ValueSource",
    "format_color",
    "get_color_format",
    "get_value",
    "parse_color",
    "set_value",
]
