"""Convert color values between formats."""

import logging
import sys

import click

from tweakui.color_formats import get_color_format
from tweakui.exceptions import collect_errors

from ._values import read_value, write_value

logger = logging.getLogger(__name__)


@click.command(name="convert")
@click.argument("values", nargs=-1, required=True)
@click.option(
    "--from",
    "-f",
    "source_format",
    default="rgb",
    show_default=True,
    help="Format descriptor of the input values",
)
@click.option(
    "--to",
    "-t",
    "target_format",
    default="rgb",
    show_default=True,
    help="Format descriptor to write",
)
def convert(values: tuple[str, ...], source_format: str, target_format: str):
    """
    Convert color VALUES from one format to another.

    Input is parsed strictly: a value that cannot be read is reported
    instead of being converted to black.

    \b
    Examples:
      tweakui convert '#ff8000' --to 'rgba()'
      tweakui convert '[1, 0.5, 0]' --from '[n]rgb' --to 0xrgb
      tweakui convert 0x0080ff --from 0xrgb --to '{}rgb'
    """
    reader = get_color_format(source_format)
    writer = get_color_format(target_format)
    logger.info(f"Converting {len(values)} value(s) from {reader!r} to {writer!r}")

    collector = collect_errors("convert colors")
    for text in values:
        with collector.try_operation(f"convert {text!r}"):
            rgba = reader.parse_strict(read_value(text, reader))
            click.echo(write_value(writer.format(rgba), writer))

    if collector.has_errors:
        click.echo(collector.get_summary(), err=True)
        sys.exit(1)
