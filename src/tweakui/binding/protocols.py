"""Protocol definitions for value binding.

- ValueCodec: encode/decode pair applied between a control and its storage
- ValueSourceLike: the attributes the accessor functions read from a source
- BindingEvent: events emitted by `BoundValue`
- BindingObserver: observer protocol for those events
"""

from enum import Enum
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ValueCodec(Protocol):
    """
    Translates between the value a control edits and the value stored.

    Codecs may be lossy (quantizing, clamping); `set_value` returns what
    `encode` produced so the control can reconcile its state.
    """

    def encode(self, value: Any) -> Any:
        """Convert a control value into its stored representation."""
        ...

    def decode(self, value: Any) -> Any:
        """Convert a stored value back into a control value."""
        ...


@runtime_checkable
class ValueSourceLike(Protocol):
    """
    Anything the accessor functions can bind to.

    All four attributes are optional in practice: the accessors read them
    with ``getattr(source, name, None)``. `ValueSource` is the concrete model.
    """

    target: Any
    property: Any
    value: Any
    codec: ValueCodec | None


class BindingEvent(Enum):
    """Events from bound value changes."""

    VALUE_INPUT = "value_input"  # Live edit while the user is still interacting
    VALUE_CHANGED = "value_changed"  # Edit committed by the user


@runtime_checkable
class BindingObserver(Protocol):
    """Observer that receives bound value events."""

    def on_binding_event(self, event: "BindingEvent", **kwargs: Any) -> None:
        """
        Handle a bound value event.

        Args:
            event: The type of binding event
            **kwargs: Event data:
                - 'value': the value as stored (after the codec)
                - 'requested': the value the control asked to write
                - 'source': the bound source

        Error Handling:
            Exceptions raised by observers are caught and logged. They do not
            propagate to the caller and do not stop other observers.
        """
        ...
