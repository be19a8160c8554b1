"""HSV <-> RGB conversion.

Both directions work on unit channels and perform no rounding; quantizing to
8 bits is the job of the color formats. The pair is exact enough that every
8-bit RGB triple survives ``rgb -> hsv -> rgb`` after rounding back to bytes.
"""

from tweakui.models import HSV, HSVA, RGB, RGBA
from tweakui.utils import clamp


def hsv_to_rgb(hsv: HSV) -> RGB:
    """
    Convert HSV to RGB.

    Args:
        hsv: Hue in degrees (any real, taken mod 360), saturation and value
             (clamped into [0, 1] here, not by the caller)

    Returns:
        RGB with channels in [0, 1]
    """
    h = hsv.h % 360
    s = clamp(hsv.s, 0.0, 1.0)
    v = clamp(hsv.v, 0.0, 1.0)

    c = v * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = v - c

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return RGB(r=r + m, g=g + m, b=b + m)


def rgb_to_hsv(rgb: RGB) -> HSV:
    """
    Convert RGB to HSV.

    Achromatic colors (gray, black, white) get hue 0 and saturation 0.

    Args:
        rgb: Channels in [0, 1]

    Returns:
        HSV with hue in [0, 360) and saturation, value in [0, 1]
    """
    r, g, b = rgb.r, rgb.g, rgb.b

    v = max(r, g, b)
    d = v - min(r, g, b)

    h = 0.0
    s = 0.0
    if d != 0:
        s = d / v
        if v == r:
            h = (g - b) / d + (6 if g < b else 0)
            h = (h % 6) * 60
        elif v == g:
            h = ((b - r) / d + 2) * 60
        else:
            h = ((r - g) / d + 4) * 60

    return HSV(h=h % 360, s=s, v=v)


def hsva_to_rgba(hsva: HSVA) -> RGBA:
    """Convert HSVA to RGBA, passing alpha through."""
    rgb = hsv_to_rgb(hsva)
    return RGBA(r=rgb.r, g=rgb.g, b=rgb.b, a=hsva.a)


def rgba_to_hsva(rgba: RGBA) -> HSVA:
    """Convert RGBA to HSVA, passing alpha through."""
    hsv = rgb_to_hsv(rgba)
    return HSVA(h=hsv.h, s=hsv.s, v=hsv.v, a=rgba.a)
