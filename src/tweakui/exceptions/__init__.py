"""
Custom exception hierarchy for tweakui.

## Exception Hierarchy

```
TweakUIError (base)
├── ColorFormatError
│   ├── ColorParseError
│   └── FormatDescriptorError
├── BindingError
└── ConfigurationError
    └── ConfigValidationError
```

Nothing in the color or binding core is fatal: parse failures degrade to a
default color and refused writes to read-only values are ignored. The only
exception that escapes the core is `BindingError`, raised when an external
target object rejects an assignment.

See `tweakui.exceptions.handlers` for utilities to handle these exceptions.
"""

from .base import TweakUIError
from .binding import BindingError
from .color import ColorFormatError, ColorParseError, FormatDescriptorError
from .config import ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorCollector,
    collect_errors,
    format_error_for_display,
    handle_errors,
    wrap_pydantic_error,
)

__all__ = [
    # Base
    "TweakUIError",
    # Binding
    "BindingError",
    # Color
    "ColorFormatError",
    "ColorParseError",
    "FormatDescriptorError",
    # Config
    "ConfigurationError",
    "ConfigValidationError",
    # Handlers
    "ErrorCollector",
    "collect_errors",
    "format_error_for_display",
    "handle_errors",
    "wrap_pydantic_error",
]
