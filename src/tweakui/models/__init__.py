"""Data models for tweakui."""

from .color import CHANNELS, HSV, HSVA, RGB, RGBA
from .config import PanelConfig, validate_format_text

__all__ = [
    "CHANNELS",
    # Colors
    "HSV",
    "HSVA",
    "RGB",
    "RGBA",
    # Config
    "PanelConfig",
    "validate_format_text",
]
