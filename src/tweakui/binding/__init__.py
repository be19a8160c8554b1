"""Value binding.

A control never owns its value: it reads and writes through a source that
either stores the value itself or proxies it onto ``target[property]``,
optionally through a codec.

## Public API

- **ValueSource**: Concrete source model (``target``, ``property``, ``value``, ``codec``)
- **Codec**: ValueCodec built from two callables
- **get_value / set_value**: Read and write any source-shaped object
- **is_writable / has_target_value**: The write guard and read precedence checks
- **BoundValue**: Source plus observers notified on input and change
- **BindingEvent / BindingObserver / ValueCodec / ValueSourceLike**: Protocols

## Example

```python
from tweakui.binding import ValueSource, get_value, set_value

settings = {"opacity": 0.5}
source = ValueSource(target=settings, property="opacity", value=1.0)

get_value(source)        # 0.5, the target wins over value
set_value(source, 0.75)  # writes settings["opacity"]
```
"""

from .accessor import get_value, has_target_value, is_writable, set_value
from .bound import BoundValue
from .observer import ObserverManager
from .protocols import BindingEvent, BindingObserver, ValueCodec, ValueSourceLike
from .source import Codec, ValueSource

__all__ = [
    # Accessors
    "get_value",
    "has_target_value",
    "is_writable",
    "set_value",
    # Models
    "Codec",
    "ValueSource",
    # Observable
    "BoundValue",
    "ObserverManager",
    # Protocols
    "BindingEvent",
    "BindingObserver",
    "ValueCodec",
    "ValueSourceLike",
]
