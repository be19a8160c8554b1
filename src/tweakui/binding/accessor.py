"""Reading and writing bound values.

Precedence rules, implemented once for every control type:

Reads
    ``target[property]`` if both are set and the target holds the property,
    otherwise ``value``. The result goes through ``codec.decode``.

Writes
    The value goes through ``codec.encode`` first. If ``target`` and
    ``property`` are set the encoded value is always written there, even when
    the target does not hold the property yet. Otherwise it is written to
    ``value``, unless ``value`` is read-only, in which case the write is
    silently skipped.

A source is any object with optional ``target``, ``property``, ``value`` and
``codec`` attributes, or a mapping with those keys. A mutable mapping gets
``value`` written by key; a read-only mapping behaves like a read-only value.
"""

import inspect
import logging
from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any

from pydantic import BaseModel

from tweakui.exceptions import BindingError

from .protocols import ValueSourceLike

logger = logging.getLogger(__name__)


def get_value(source: ValueSourceLike | Mapping[str, Any]) -> Any:
    """
    Get the current value of a source.

    Args:
        source: A `ValueSource`, any object with optional ``target``,
                ``property``, ``value`` and ``codec`` attributes, or a
                mapping with those keys

    Returns:
        The decoded value

    Example:
        >>> get_value({"target": {"speed": 2}, "property": "speed"})
        2
    """
    return _decode(source, _read_raw(source))


def set_value(source: ValueSourceLike | Mapping[str, Any], value: Any) -> Any:
    """
    Write a value to a source.

    Args:
        source: The source to write to
        value: The control value (before encoding)

    Returns:
        The value as stored: the encoded value if the write happened, or the
        untouched stored value if ``value`` was read-only

    Raises:
        BindingError: If the bound target rejects the assignment
    """
    encoded = _encode(source, value)

    if _has_binding(source):
        _write_target(_field(source, "target"), _field(source, "property"), encoded)
        return encoded

    if not is_writable(source, "value"):
        logger.debug(f"Skipping write to read-only value of {type(source).__name__}")
        return _field(source, "value")

    if isinstance(source, MutableMapping):
        source["value"] = encoded
        return encoded

    try:
        source.value = encoded
    except AttributeError as e:
        logger.debug(f"Skipping write to value of {type(source).__name__}: {e}")
        return _field(source, "value")
    return encoded


def is_writable(obj: Any, name: str) -> bool:
    """
    Check whether ``obj.name`` (or ``obj[name]`` for a mapping) may be assigned.

    Frozen pydantic models, read-only mappings and read-only data descriptors
    (a ``property`` without setter) are not writable. Plain attributes,
    absent attributes and descriptors with a setter are.
    """
    if isinstance(obj, Mapping):
        return isinstance(obj, MutableMapping)

    if isinstance(obj, BaseModel) and obj.model_config.get("frozen"):
        return False

    attr = inspect.getattr_static(type(obj), name, None)
    if isinstance(attr, property):
        return attr.fset is not None
    return True


def has_target_value(source: ValueSourceLike | Mapping[str, Any]) -> bool:
    """Check whether reads resolve to ``target[property]`` rather than ``value``."""
    return _has_binding(source) and _target_holds(_field(source, "target"), _field(source, "property"))


def _field(source: Any, name: str) -> Any:
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def _has_binding(source: Any) -> bool:
    return _field(source, "target") is not None and _field(source, "property") is not None


def _read_raw(source: Any) -> Any:
    if has_target_value(source):
        return _read_target(_field(source, "target"), _field(source, "property"))
    return _field(source, "value")


def _target_holds(target: Any, prop: Any) -> bool:
    if isinstance(target, Mapping):
        return prop in target
    if isinstance(target, Sequence) and not isinstance(target, (str, bytes)):
        return isinstance(prop, int) and -len(target) <= prop < len(target)
    return isinstance(prop, str) and hasattr(target, prop)


def _read_target(target: Any, prop: Any) -> Any:
    if isinstance(target, (Mapping, Sequence)) and not isinstance(target, (str, bytes)):
        return target[prop]
    return getattr(target, prop)


def _write_target(target: Any, prop: Any, value: Any) -> None:
    try:
        if isinstance(target, (MutableMapping, MutableSequence)):
            target[prop] = value
        elif isinstance(target, (Mapping, Sequence)):
            raise TypeError(f"{type(target).__name__} is immutable")
        else:
            setattr(target, prop, value)
    except (AttributeError, TypeError, ValueError, IndexError) as e:
        raise BindingError(target, prop, original_error=str(e)) from e


def _codec(source: Any) -> Any:
    return _field(source, "codec")


def _encode(source: Any, value: Any) -> Any:
    codec = _codec(source)
    return codec.encode(value) if codec is not None else value


def _decode(source: Any, value: Any) -> Any:
    codec = _codec(source)
    return codec.decode(value) if codec is not None else value
