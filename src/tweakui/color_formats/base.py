"""Base class shared by all color formats."""

import logging
import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, ClassVar

from tweakui.exceptions import ColorParseError, handle_errors
from tweakui.models import CHANNELS, RGBA

from .descriptor import FormatKind

logger = logging.getLogger(__name__)


class ColorFormat(ABC):
    """
    Translates between one external color representation and RGBA.

    Subclasses implement `parse_strict` and `format`. The public `parse`
    wraps `parse_strict` so that malformed input is logged and degrades to
    opaque black instead of raising: colors are parsed on every render while
    the user may still be typing.

    Attributes:
        kind: The storage kind this class implements
        components: Channel letters in storage order
    """

    kind: ClassVar[FormatKind]

    def __init__(self, components: Sequence[str]):
        unknown = [key for key in components if key not in CHANNELS]
        if unknown:
            raise ValueError(f"Unknown color channels {unknown}; expected letters from 'rgba'")
        self.components: tuple[str, ...] = tuple(components)

    @property
    def descriptor(self) -> str:
        """Format descriptor equivalent to this instance."""
        return "".join(self.components)

    @handle_errors(
        operation_name="parse color",
        fallback_value=RGBA.black(),
        re_raise=False,
        log_level=logging.WARNING,
    )
    def parse(self, value: Any = None) -> RGBA:
        """
        Parse a value into RGBA, never raising.

        Channels missing from the value keep their defaults (0 for colors,
        1 for alpha). Input that cannot be read at all yields opaque black
        and a logged warning.
        """
        return self.parse_strict(value)

    @abstractmethod
    def parse_strict(self, value: Any) -> RGBA:
        """
        Parse a value into RGBA.

        Raises:
            ColorParseError: If nothing usable can be read from the value
        """

    @abstractmethod
    def format(self, rgba: RGBA) -> Any:
        """Format RGBA into this representation. Total, never raises."""

    def _fail(self, value: Any, reason: str) -> ColorParseError:
        return ColorParseError(value, self.descriptor, reason)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.descriptor!r})"


def new_channels() -> dict[str, float]:
    """Channel defaults every parse starts from."""
    return {"r": 0.0, "g": 0.0, "b": 0.0, "a": 1.0}


def to_number(raw: Any) -> float:
    """Best-effort numeric coercion; anything unreadable or non-finite counts as 0."""
    if raw is None or isinstance(raw, bool):
        return float(raw or 0)
    try:
        number = float(raw)
    except (TypeError, ValueError):
        logger.debug(f"Treating non-numeric channel value {raw!r} as 0")
        return 0.0
    return finite_or_zero(number)


def finite_or_zero(number: float) -> float:
    """Replace NaN and infinities with 0 so every parsed color can be formatted."""
    if math.isfinite(number):
        return number
    logger.debug(f"Treating non-finite channel value {number!r} as 0")
    return 0.0
