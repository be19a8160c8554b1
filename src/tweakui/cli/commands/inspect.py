"""Show how a format descriptor is interpreted."""

import click

from tweakui.color_formats import FormatDescriptor, get_color_format


@click.command(name="inspect")
@click.argument("descriptor")
def inspect(descriptor: str):
    """Show the kind, channels and codec a format DESCRIPTOR resolves to."""
    parsed = FormatDescriptor.parse(descriptor)
    codec = get_color_format(descriptor)

    click.echo(f"Descriptor: {parsed.text}")
    click.echo(f"  Kind: {parsed.kind.value}")
    click.echo(f"  Components: {' '.join(parsed.components)}")
    click.echo(f"  Normalized: {'yes' if parsed.normalized else 'no'}")
    click.echo(f"  Alpha: {'yes' if parsed.has_alpha else 'no'}")
    click.echo(f"  Codec: {codec!r}")
