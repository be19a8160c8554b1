"""Observable bound value."""

import logging
from threading import Lock
from typing import Any

from .accessor import get_value, set_value
from .observer import ObserverManager
from .protocols import BindingEvent, BindingObserver, ValueSourceLike

logger = logging.getLogger(__name__)


class BoundValue:
    """
    A value source plus the observers interested in its edits.

    Controls call `input` for every intermediate value while the user drags
    or types, and `commit` once the edit is final. Both write through
    `set_value` and notify observers with the value as actually stored.

    Threading:
        Writes are serialized by a lock; observers are called after the lock
        is released.

    Usage Example:
        ```python
        settings = {"speed": 0.5}
        speed = BoundValue(ValueSource(target=settings, property="speed"))
        speed.register_observer(my_observer)

        speed.input(0.6)   # VALUE_INPUT
        speed.commit(0.7)  # VALUE_CHANGED
        ```
    """

    def __init__(self, source: ValueSourceLike):
        """
        Initialize the bound value.

        Args:
            source: A `ValueSource` or any object with optional ``target``,
                    ``property``, ``value`` and ``codec`` attributes
        """
        self._source = source
        self._lock = Lock()
        self._observers = ObserverManager[BindingObserver](
            lock=self._lock, observer_type_name="binding"
        )

    @property
    def source(self) -> ValueSourceLike:
        return self._source

    def register_observer(self, observer: BindingObserver) -> None:
        self._observers.register(observer)

    def unregister_observer(self, observer: BindingObserver) -> None:
        self._observers.unregister(observer)

    def get(self) -> Any:
        """Get the current (decoded) value."""
        with self._lock:
            return get_value(self._source)

    def input(self, value: Any) -> Any:
        """
        Write an intermediate value.

        Returns:
            The value as stored
        """
        return self._write(value, BindingEvent.VALUE_INPUT)

    def commit(self, value: Any) -> Any:
        """
        Write the final value of an edit.

        Returns:
            The value as stored
        """
        return self._write(value, BindingEvent.VALUE_CHANGED)

    def _write(self, value: Any, event: BindingEvent) -> Any:
        with self._lock:
            stored = set_value(self._source, value)

        logger.debug(f"{event.value}: requested={value!r} stored={stored!r}")
        self._observers.notify(
            "on_binding_event", event, value=stored, requested=value, source=self._source
        )
        return stored
