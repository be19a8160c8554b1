"""Generic utility helpers for tweakui."""

import math


def clamp(value: float, lower: float | None, upper: float | None) -> float:
    """
    Clamp a number into [lower, upper].

    Either bound may be None to leave that side open.

    Example:
        >>> clamp(1.5, 0, 1)
        1
        >>> clamp(-3, None, 10)
        -3
    """
    if lower is not None and value < lower:
        return lower
    if upper is not None and value > upper:
        return upper
    return value


def to_byte(channel: float) -> int:
    """
    Scale a unit channel to 0-255.

    Halves round up (76.5 -> 77) rather than to even, so every color format
    agrees on how a channel is quantized. Values that are not finite once
    scaled (NaN, infinities, overflow) map to 0.
    """
    scaled = channel * 255
    if not math.isfinite(scaled):
        return 0
    return math.floor(scaled + 0.5)


__all__ = ["clamp", "to_byte"]
