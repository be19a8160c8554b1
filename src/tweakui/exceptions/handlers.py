"""
Error handling helpers.

| Scenario | Use This |
|----------|----------|
| Color value cannot be parsed | `ColorParseError`, caught by the codec's lenient `parse` (`handle_errors`) |
| Format descriptor has no channels | `FormatDescriptorError` (logged, falls back to `rgb`) |
| Bound target refuses a write | `BindingError` |
| Config value invalid | `ConfigValidationError` via `wrap_pydantic_error` |
| Converting many values from the CLI | `collect_errors` |

Example:
    ```python
    codec = get_color_format("#rgb")
    codec.parse("#zz")         # logs a warning, returns opaque black
    codec.parse_strict("#zz")  # raises ColorParseError
    ```
"""

import logging
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

from .base import TweakUIError
from .config import ConfigValidationError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def handle_errors(
    *,
    operation_name: str,
    fallback_value: Optional[T] = None,
    re_raise: bool = True,
    log_level: int = logging.ERROR
) -> Callable:
    """
    Decorator that logs failures of the wrapped call.

    tweakui errors are logged with their technical message; anything else
    is logged with a traceback. The exception is then re-raised, or
    ``fallback_value`` is returned when ``re_raise`` is False.

    Args:
        operation_name: Used in the log line, e.g. "parse color"
        fallback_value: Returned instead of raising when re_raise=False
        re_raise: Whether the exception propagates after logging
        log_level: Level of the log line (default: ERROR)
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                if isinstance(e, TweakUIError):
                    logger.log(log_level, f"Failed to {operation_name}: {e.technical_message}")
                else:
                    logger.log(log_level, f"Unexpected error during {operation_name}: {e}", exc_info=True)
                if re_raise:
                    raise
                return fallback_value

        return wrapper
    return decorator


def wrap_pydantic_error(error: Exception, source: Optional[str] = None) -> ConfigValidationError:
    """
    Turn a pydantic ValidationError into a `ConfigValidationError`.

    A single failing field is reported by name; several are listed in the
    error message under the field name "multiple fields".

    Args:
        error: Usually a pydantic ValidationError
        source: Where the values came from, shown in the recovery hint
    """
    from pydantic import ValidationError

    details = error.errors() if isinstance(error, ValidationError) else []
    if len(details) == 1:
        return ConfigValidationError(
            field=_location(details[0]),
            value=details[0].get('input'),
            error_msg=details[0].get('msg', 'validation failed'),
            source=source
        )
    if details:
        lines = "\n".join(f"  - {_location(d)}: {d.get('msg', 'validation failed')}" for d in details)
        return ConfigValidationError(
            field="multiple fields",
            value=None,
            error_msg=f"{len(details)} validation errors:\n{lines}",
            source=source
        )
    return ConfigValidationError(field="unknown", value=None, error_msg=str(error), source=source)


def _location(detail: dict[str, Any]) -> str:
    return ".".join(str(part) for part in detail.get('loc', ())) or "unknown"


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Message and recovery hint to show a user.

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, TweakUIError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None


def collect_errors(operation: str) -> "ErrorCollector":
    """
    Create an error collector for a batch of independent steps.

    Example:
        ```python
        collector = collect_errors("convert colors")
        for text in values:
            with collector.try_operation(f"convert {text!r}"):
                click.echo(convert(text))
        if collector.has_errors:
            click.echo(collector.get_summary(), err=True)
        ```
    """
    return ErrorCollector(operation)


class ErrorCollector:
    """Runs steps that may fail, keeping going and remembering each failure."""

    def __init__(self, operation: str):
        self.operation = operation
        self.errors: list[tuple[str, Exception]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def try_operation(self, sub_operation: str) -> "_Step":
        """Context manager for one step; an exception in it is recorded, not raised."""
        return _Step(self, sub_operation)

    def get_summary(self) -> str:
        if not self.errors:
            return f"All operations completed successfully ({self.success_count} total)"

        total = self.error_count + self.success_count
        lines = [f"Failed {self.error_count} of {total} operations:"]
        lines += [f"  - {step}: {format_error_for_display(error)[0]}" for step, error in self.errors]
        return "\n".join(lines)


class _Step:
    def __init__(self, collector: ErrorCollector, name: str):
        self.collector = collector
        self.name = name

    def __enter__(self) -> "_Step":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is None:
            self.collector.success_count += 1
            return False
        if not issubclass(exc_type, Exception):
            return False

        self.collector.errors.append((self.name, exc_val))
        logger.debug(f"{self.collector.operation}: {self.name} failed: {exc_val}")
        return True
