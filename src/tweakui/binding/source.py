"""Value source model."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .protocols import ValueCodec


class Codec:
    """
    ValueCodec built from two callables.

    Example:
        >>> percent = Codec(encode=lambda v: round(v * 100), decode=lambda v: v / 100)
        >>> percent.encode(0.256)
        26
    """

    def __init__(self, encode: Callable[[Any], Any], decode: Callable[[Any], Any]):
        self._encode = encode
        self._decode = decode

    def encode(self, value: Any) -> Any:
        return self._encode(value)

    def decode(self, value: Any) -> Any:
        return self._decode(value)


class ValueSource(BaseModel):
    """
    Where a control's value lives.

    Either directly in ``value``, or on ``target[property]`` (mapping key,
    sequence index or attribute). When the target holds the property it is
    authoritative for reads, and writes always go to it when both ``target``
    and ``property`` are set. ``codec`` translates between the control value
    and the stored value.

    Subclasses with ``frozen=True`` model config, or a read-only ``value``
    property, make direct writes a no-op.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    target: Any = Field(default=None, description="Object owning the bound property")
    property: str | int | None = Field(default=None, description="Key, index or attribute name on target")
    value: Any = Field(default=None, description="Value used when no target property is bound")
    codec: ValueCodec | None = Field(default=None, description="Encode/decode pair applied on access")
