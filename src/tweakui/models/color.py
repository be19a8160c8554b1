"""Color value models.

RGBA with every channel normalized to [0, 1] is the canonical representation
all color formats parse into and format out of. Channel ranges are nominal
and deliberately not validated: lenient parsing and floating point HSV math
can produce values slightly outside the unit interval, and clamping is left
to whoever turns a color into bytes.
"""

from pydantic import BaseModel, ConfigDict, Field

from tweakui.utils import to_byte

CHANNELS = ("r", "g", "b", "a")


class RGB(BaseModel):
    """RGB color with channels normalized to [0, 1]."""

    model_config = ConfigDict(frozen=True)

    r: float = Field(default=0.0, description="Red (0-1)")
    g: float = Field(default=0.0, description="Green (0-1)")
    b: float = Field(default=0.0, description="Blue (0-1)")

    def __getitem__(self, key: str) -> float:
        """Access a channel by its letter, e.g. ``color["r"]``."""
        if key not in type(self).model_fields:
            raise KeyError(key)
        return getattr(self, key)

    def to_bytes(self) -> tuple[int, ...]:
        """Convert color channels to rounded 8-bit values.

        Example:
            >>> RGB(r=1.0, g=0.5, b=0.0).to_bytes()
            (255, 128, 0)
        """
        return tuple(to_byte(getattr(self, key)) for key in ("r", "g", "b"))


class RGBA(RGB):
    """RGB color with alpha, the canonical color representation."""

    a: float = Field(default=1.0, description="Alpha (0-1)")

    @classmethod
    def black(cls) -> "RGBA":
        """Create opaque black, the fallback for unparseable input."""
        return cls(r=0.0, g=0.0, b=0.0, a=1.0)

    @classmethod
    def from_bytes(cls, r: int, g: int, b: int, a: float = 1.0) -> "RGBA":
        """Create a color from 8-bit channels and a unit alpha."""
        return cls(r=r / 255, g=g / 255, b=b / 255, a=a)

    def with_channel(self, key: str, value: float) -> "RGBA":
        """Return a copy with one channel replaced."""
        if key not in CHANNELS:
            raise KeyError(key)
        return self.model_copy(update={key: float(value)})

    def rgb(self) -> RGB:
        """Drop the alpha channel."""
        return RGB(r=self.r, g=self.g, b=self.b)


class HSV(BaseModel):
    """HSV color: hue in degrees [0, 360), saturation and value in [0, 1]."""

    model_config = ConfigDict(frozen=True)

    h: float = Field(default=0.0, description="Hue in degrees (0-360)")
    s: float = Field(default=0.0, description="Saturation (0-1)")
    v: float = Field(default=0.0, description="Value (0-1)")


class HSVA(HSV):
    """HSV color with alpha."""

    a: float = Field(default=1.0, description="Alpha (0-1)")

    def hsv(self) -> HSV:
        return HSV(h=self.h, s=self.s, v=self.v)
