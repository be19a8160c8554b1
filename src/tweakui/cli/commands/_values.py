"""Helpers shared by the color commands."""

import json
import logging
import sys
from typing import Any, NoReturn

import click

from tweakui.color_formats import ColorFormat, FormatKind
from tweakui.exceptions import format_error_for_display

logger = logging.getLogger(__name__)


def read_value(text: str, codec: ColorFormat) -> Any:
    """
    Turn command line text into the raw value a codec expects.

    List and mapping formats take JSON; every other kind is handed the text
    as is (the number codec reads '0x...' literals itself).
    """
    if codec.kind in (FormatKind.ARRAY, FormatKind.OBJECT):
        try:
            return json.loads(text)
        except ValueError:
            logger.debug(f"{text!r} is not JSON; passing it through unchanged")
    return text


def write_value(value: Any, codec: ColorFormat) -> str:
    """Render a formatted value for the terminal."""
    if codec.kind is FormatKind.NUMBER:
        return "0x" + format(value, f"0{2 * len(codec.components)}x")
    if isinstance(value, (list, dict)):
        return json.dumps(value)
    return str(value)


def fail(error: Exception) -> NoReturn:
    """Print an error with its recovery hint and exit with status 1."""
    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"Error: {user_message}", err=True)
    if recovery_hint:
        click.echo(recovery_hint, err=True)
    sys.exit(1)
