"""Color format descriptors.

A format descriptor is a short string selecting how a color value is stored:

| Descriptor | Kind | Example value |
|------------|------|---------------|
| ``rgb``, ``#rgba`` | hex string (default) | ``"#ff8000"`` |
| ``rgb()``, ``rgba()`` | CSS function string | ``"rgba(255, 128, 0, 0.5)"`` |
| ``0xrgb`` | packed integer | ``0x0080ff`` |
| ``[]rgb``, ``[n]rgba`` | list | ``[255, 128, 0]`` / ``[1.0, 0.5, 0.0, 1.0]`` |
| ``{}rgb``, ``{n}rgb`` | mapping | ``{"r": 255, "g": 128, "b": 0}`` |

The letters fix which channels are present and in which order. ``[n]`` and
``{n}`` mark normalized channels ([0, 1] instead of [0, 255]).

Descriptors are parsed once into a `FormatDescriptor`; codecs never look at
the raw string again.
"""

import logging
import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from tweakui.exceptions import FormatDescriptorError

logger = logging.getLogger(__name__)

DEFAULT_COMPONENTS = ("r", "g", "b")

_COMPONENTS = re.compile(r"[rgba]+")
_ARRAY = re.compile(r"\[n?\]")
_ARRAY_NORMALIZED = re.compile(r"\[n\]")
_OBJECT = re.compile(r"\{n?\}")
_OBJECT_NORMALIZED = re.compile(r"\{n\}")
_NUMBER = re.compile(r"0x")
_CSS = re.compile(r"\(\)")


class FormatKind(str, Enum):
    """Representation a color value is stored in."""

    HEX_STRING = "hex_string"  # "#rrggbb", default
    CSS_STRING = "css_string"  # "rgb(r, g, b)"
    NUMBER = "number"  # 0xbbggrr
    ARRAY = "array"  # [r, g, b]
    OBJECT = "object"  # {"r": r, "g": g, "b": b}


class FormatDescriptor(BaseModel):
    """A parsed color format descriptor."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="The descriptor string as given")
    kind: FormatKind = Field(default=FormatKind.HEX_STRING, description="Storage kind")
    components: tuple[str, ...] = Field(
        default=DEFAULT_COMPONENTS, description="Channel letters in storage order"
    )
    normalized: bool = Field(
        default=False, description="Array/object color channels are in [0, 1]"
    )

    @property
    def has_alpha(self) -> bool:
        return "a" in self.components

    @classmethod
    def parse(cls, text: str = "rgb") -> "FormatDescriptor":
        """
        Parse a descriptor string.

        Kinds are checked in a fixed order: array brackets, object braces,
        ``0x`` prefix, trailing ``()``, and hex string as the fallback. Any
        string resolves to some kind; this never raises.

        Args:
            text: Descriptor such as '#rgb', '0xrgba' or '[n]rgb'

        Returns:
            The parsed descriptor
        """
        text = text or "rgb"
        try:
            components = cls._components(text)
        except FormatDescriptorError as e:
            logger.warning(f"{e.technical_message}; using {''.join(DEFAULT_COMPONENTS)!r}")
            components = DEFAULT_COMPONENTS

        if _ARRAY.search(text):
            kind = FormatKind.ARRAY
            normalized = bool(_ARRAY_NORMALIZED.search(text))
        elif _OBJECT.search(text):
            kind = FormatKind.OBJECT
            normalized = bool(_OBJECT_NORMALIZED.search(text))
        elif _NUMBER.search(text):
            kind, normalized = FormatKind.NUMBER, False
        elif _CSS.search(text):
            kind, normalized = FormatKind.CSS_STRING, False
        else:
            kind, normalized = FormatKind.HEX_STRING, False

        logger.debug(f"Parsed color format {text!r}: {kind.value} {''.join(components)} normalized={normalized}")
        return cls(text=text, kind=kind, components=components, normalized=normalized)

    @staticmethod
    def _components(text: str) -> tuple[str, ...]:
        match = _COMPONENTS.search(text)
        if match is None:
            raise FormatDescriptorError(text)
        return tuple(match.group(0))
