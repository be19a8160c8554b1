"""Print the HSV components of a color."""

import click

from tweakui.color_formats import get_color_format, rgba_to_hsva
from tweakui.exceptions import ColorParseError

from ._values import fail, read_value


@click.command(name="hsv")
@click.argument("value")
@click.option(
    "--format",
    "-f",
    "color_format",
    default="rgb",
    show_default=True,
    help="Format descriptor of VALUE",
)
def hsv(value: str, color_format: str):
    """
    Print hue, saturation and value of a color VALUE.

    Hue is in degrees, saturation and value in [0, 1]. Alpha is shown when
    the format has an alpha channel.
    """
    codec = get_color_format(color_format)
    try:
        rgba = codec.parse_strict(read_value(value, codec))
    except ColorParseError as e:
        fail(e)

    hsva = rgba_to_hsva(rgba)
    line = f"h={hsva.h:.1f} s={hsva.s:.3f} v={hsva.v:.3f}"
    if "a" in codec.components:
        line += f" a={hsva.a:.3f}"
    click.echo(line)
