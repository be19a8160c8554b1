"""Value binding exceptions."""

from typing import Any

from .base import TweakUIError


class BindingError(TweakUIError):
    """The bound target refused a write."""

    def __init__(self, target: Any, property: Any, original_error: str | None = None):
        """
        Initialize binding error.

        Args:
            target: The object that was written to
            property: Key or attribute name on the target
            original_error: Message of the exception raised by the target
        """
        target_name = type(target).__name__
        tech_msg = f"Assignment {target_name}[{property!r}] failed"
        if original_error:
            tech_msg += f": {original_error}"

        super().__init__(
            user_message=f"Cannot write '{property}' on {target_name}",
            technical_message=tech_msg,
            recoverable=False,
            recovery_hint="Bind the control to a mutable object or drop 'target'/'property' to store the value on the control",
        )
        self.target = target
        self.property = property
