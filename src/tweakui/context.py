"""Panel context: state shared by all controls of one panel tree."""

import logging
from typing import Any

from tweakui.binding import get_value, set_value
from tweakui.color_formats import ColorFormat, ColorFormatRegistry
from tweakui.exceptions import ColorParseError
from tweakui.models import RGBA, PanelConfig

logger = logging.getLogger(__name__)


class PanelContext:
    """
    Owns the color format cache and configuration of one panel.

    Whoever builds a widget tree creates one context and hands it to the
    controls. Tests create a fresh context (or call `reset`) instead of
    sharing the module-level format cache.

    Usage Example:
        ```python
        context = PanelContext(PanelConfig(default_color_format="[n]rgba"))
        rgba = context.parse_color([1.0, 0.5, 0.0, 1.0])
        context.format_color(rgba, "#rgb")  # '#ff8000'
        ```
    """

    def __init__(
        self,
        config: PanelConfig | None = None,
        registry: ColorFormatRegistry | None = None,
    ):
        """
        Initialize the context.

        Args:
            config: Panel settings (defaults to `PanelConfig()`)
            registry: Format cache to use (defaults to a new private one)
        """
        self.config = config or PanelConfig()
        self.registry = registry if registry is not None else ColorFormatRegistry()
        logger.debug(f"PanelContext created with default format {self.config.default_color_format!r}")

    def color_format(self, descriptor: str | None = None) -> ColorFormat:
        """Resolve a descriptor, falling back to the configured default."""
        return self.registry.get(descriptor or self.config.default_color_format)

    def parse_color(self, value: Any, descriptor: str | None = None) -> RGBA:
        """
        Parse a stored color value.

        Lenient by default. With ``config.lenient_parsing`` off, malformed
        values raise instead of degrading to black.

        Raises:
            ColorParseError: Only when lenient parsing is disabled
        """
        codec = self.color_format(descriptor)
        if self.config.lenient_parsing and self.config.log_parse_failures:
            return codec.parse(value)

        try:
            return codec.parse_strict(value)
        except ColorParseError as e:
            if not self.config.lenient_parsing:
                raise
            logger.debug(f"Quiet parse fallback: {e.technical_message}")
            return RGBA.black()

    def format_color(self, rgba: RGBA, descriptor: str | None = None) -> Any:
        return self.color_format(descriptor).format(rgba)

    def read(self, source: Any) -> Any:
        """Read a bound value (see `tweakui.binding.get_value`)."""
        return get_value(source)

    def write(self, source: Any, value: Any) -> Any:
        """Write a bound value, returning what was stored."""
        return set_value(source, value)

    def reset(self) -> None:
        """Drop all cached color formats."""
        self.registry.clear()
