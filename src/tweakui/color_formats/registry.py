"""
Color format registry.

Resolving a Format Descriptor
=============================

::

    get_color_format("[n]rgba")
            ↓
    Registry cache hit for "[n]rgba"? ── yes ──→ return cached codec
            ↓ no
    FormatDescriptor.parse("[n]rgba")
        kind=ARRAY, components=("r","g","b","a"), normalized=True
            ↓
    FORMATS[ARRAY](descriptor) → ArrayColorFormat(("r","g","b","a"), normalized=True)
            ↓
    cache["[n]rgba"] = codec

The cache is keyed by the exact descriptor string: '#rgb' and 'rgb' resolve
to equal but distinct codec instances. Entries are never evicted; the number
of distinct descriptors an application uses is small.

Each `PanelContext` owns its own `ColorFormatRegistry`; the module-level
helpers use a shared default instance.
"""

import logging
from collections.abc import Callable
from threading import Lock
from typing import Any

from tweakui.models import RGBA

from .array_format import ArrayColorFormat
from .base import ColorFormat
from .css_string import CssStringFormat
from .descriptor import FormatDescriptor, FormatKind
from .hex_string import HexStringFormat
from .number_format import NumberColorFormat
from .object_format import ObjectColorFormat

logger = logging.getLogger(__name__)

FormatFactory = Callable[[FormatDescriptor], ColorFormat]

# Registry of codec factories
# Format: FormatKind: factory(descriptor) -> ColorFormat
FORMATS: dict[FormatKind, FormatFactory] = {}


def register_format(kind: FormatKind, factory: FormatFactory) -> None:
    """
    Register the codec factory for a format kind.

    Replaces any factory previously registered for the kind. Registries
    that already cached a codec of this kind keep it until cleared.

    Args:
        kind: The format kind the factory handles
        factory: Callable building a codec from a parsed descriptor
    """
    FORMATS[kind] = factory
    logger.debug(f"Registered color format factory for {kind.value}")


def create_format(descriptor: FormatDescriptor) -> ColorFormat:
    """
    Build a new codec for a parsed descriptor.

    Kinds without a registered factory fall back to the hex string codec.
    """
    factory = FORMATS.get(descriptor.kind)
    if factory is None:
        logger.warning(f"No color format registered for {descriptor.kind.value}; using hex string")
        return HexStringFormat(descriptor.components)
    return factory(descriptor)


def _register_builtin_formats() -> None:
    """Register built-in formats. Called on module import."""
    register_format(FormatKind.HEX_STRING, lambda d: HexStringFormat(d.components))
    register_format(FormatKind.CSS_STRING, lambda d: CssStringFormat(d.components))
    register_format(FormatKind.NUMBER, lambda d: NumberColorFormat(d.components))
    register_format(FormatKind.ARRAY, lambda d: ArrayColorFormat(d.components, d.normalized))
    register_format(FormatKind.OBJECT, lambda d: ObjectColorFormat(d.components, d.normalized))


_register_builtin_formats()


class ColorFormatRegistry:
    """
    Cache of codecs keyed by descriptor string.

    Thread Safety:
        Lookups and inserts are protected by a lock, so one registry may be
        shared by panels living on different threads.
    """

    def __init__(self):
        self._formats: dict[str, ColorFormat] = {}
        self._lock = Lock()

    def get(self, descriptor: str | None = "rgb") -> ColorFormat:
        """
        Get the codec for a descriptor, creating and caching it on first use.

        Args:
            descriptor: Format descriptor; None means 'rgb'

        Returns:
            The same codec instance for every call with the same string
        """
        if descriptor is None:
            descriptor = "rgb"

        with self._lock:
            codec = self._formats.get(descriptor)
            if codec is None:
                codec = create_format(FormatDescriptor.parse(descriptor))
                self._formats[descriptor] = codec
                logger.debug(f"Cached color format {descriptor!r} -> {codec!r}")
            return codec

    def clear(self) -> None:
        """Forget all cached codecs."""
        with self._lock:
            count = len(self._formats)
            self._formats.clear()
        if count > 0:
            logger.info(f"Cleared {count} cached color format(s)")

    def __contains__(self, descriptor: str) -> bool:
        with self._lock:
            return descriptor in self._formats

    def __len__(self) -> int:
        with self._lock:
            return len(self._formats)


_default_registry = ColorFormatRegistry()


def default_registry() -> ColorFormatRegistry:
    """Get the registry shared by the module-level helpers."""
    return _default_registry


def get_color_format(
    descriptor: str | None = "rgb", registry: ColorFormatRegistry | None = None
) -> ColorFormat:
    """
    Get a codec for the given format descriptor.

    Args:
        descriptor: Format descriptor, e.g. '#rgb', 'rgba()', '0xrgb', '[n]rgb'
        registry: Registry to resolve through (defaults to the shared one)

    Example:
        >>> get_color_format("#rgb").format(RGBA(r=1.0, g=0.5, b=0.0))
        '#ff8000'
    """
    if registry is None:
        registry = _default_registry
    return registry.get(descriptor)


def parse_color(
    value: Any, descriptor: str | None = "rgb", registry: ColorFormatRegistry | None = None
) -> RGBA:
    """Parse a stored color value into RGBA (lenient, never raises)."""
    return get_color_format(descriptor, registry).parse(value)


def format_color(
    rgba: RGBA, descriptor: str | None = "rgb", registry: ColorFormatRegistry | None = None
) -> Any:
    """Format RGBA into the representation named by the descriptor."""
    return get_color_format(descriptor, registry).format(rgba)
