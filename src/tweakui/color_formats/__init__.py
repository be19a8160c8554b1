"""Color conversion and color format codecs.

## Public API

### Color space conversion

- **hsv_to_rgb / rgb_to_hsv**: HSV <-> RGB on unit channels
- **hsva_to_rgba / rgba_to_hsva**: the same with alpha carried through

### Formats

- **ColorFormat**: Base class of all codecs (`parse`, `parse_strict`, `format`)
- **HexStringFormat**, **CssStringFormat**, **NumberColorFormat**,
  **ArrayColorFormat**, **ObjectColorFormat**: the built-in codecs
- **FormatDescriptor** / **FormatKind**: parsed descriptor strings

### Registry

- **ColorFormatRegistry**: Descriptor string -> codec cache
- **get_color_format**, **parse_color**, **format_color**: helpers on the
  shared default registry
- **register_format**: Replace the codec used for a format kind

## Example

```python
from tweakui.color_formats import get_color_format, rgb_to_hsv

codec = get_color_format("rgba()")
rgba = codec.parse("rgba(255, 128, 0, 0.5)")
hsv = rgb_to_hsv(rgba)
codec.format(rgba)  # 'rgba(255, 128, 0, 0.5)'
```
"""

from .array_format import ArrayColorFormat
from .base import ColorFormat
from .converter import hsv_to_rgb, hsva_to_rgba, rgb_to_hsv, rgba_to_hsva
from .css_string import CssStringFormat
from .descriptor import FormatDescriptor, FormatKind
from .hex_string import HexStringFormat
from .number_format import NumberColorFormat
from .object_format import ObjectColorFormat
from .registry import (
    FORMATS,
    ColorFormatRegistry,
    create_format,
    default_registry,
    format_color,
    get_color_format,
    parse_color,
    register_format,
)

__all__ = [
    # Conversion
    "hsv_to_rgb",
    "hsva_to_rgba",
    "rgb_to_hsv",
    "rgba_to_hsva",
    # Formats
    "ArrayColorFormat",
    "ColorFormat",
    "CssStringFormat",
    "FormatDescriptor",
    "FormatKind",
    "HexStringFormat",
    "NumberColorFormat",
    "ObjectColorFormat",
    # Registry
    "FORMATS",
    "ColorFormatRegistry",
    "create_format",
    "default_registry",
    "format_color",
    "get_color_format",
    "parse_color",
    "register_format",
]
