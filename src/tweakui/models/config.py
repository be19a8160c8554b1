"""Panel configuration model."""

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

# Characters a color format descriptor may be made of
FORMAT_DESCRIPTOR_PATTERN = re.compile(r"^[\srgba#()\[\]{}n0x]*$", re.IGNORECASE)


def validate_format_text(value: str) -> str:
    """
    Validate a color format descriptor string.

    Only checks the alphabet; the kind is resolved later by
    `FormatDescriptor.parse`. An empty descriptor means the default 'rgb'.

    Raises:
        ValueError: If the descriptor contains foreign characters
    """
    value = value.strip()
    if not value:
        return "rgb"
    if not FORMAT_DESCRIPTOR_PATTERN.match(value):
        raise ValueError(
            f"'{value}' is not a color format; use r, g, b, a with '#', '0x', '()', '[]', '[n]', '{{}}' or '{{n}}'"
        )
    return value


class PanelConfig(BaseModel):
    """Settings shared by all controls of one panel."""

    default_color_format: str = Field(
        default="rgb",
        description="Format descriptor used when a color control does not name one",
    )
    lenient_parsing: bool = Field(
        default=True,
        description=(
            "Degrade unparseable color input to opaque black instead of raising. "
            "Interactive panels keep this on; batch tools may turn it off."
        ),
    )
    log_parse_failures: bool = Field(
        default=True,
        description="Log a warning whenever lenient parsing had to fall back",
    )

    @field_validator("default_color_format")
    @classmethod
    def validate_default_color_format(cls, v: str) -> str:
        """Ensure the default format is a plausible descriptor."""
        return validate_format_text(v)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], source: str | None = None) -> "PanelConfig":
        """
        Build a config from a plain mapping.

        Args:
            data: Raw configuration values
            source: Description of where the values came from, for error messages

        Raises:
            ConfigValidationError: If any value fails validation
        """
        from tweakui.exceptions import wrap_pydantic_error

        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise wrap_pydantic_error(e, source) from e
