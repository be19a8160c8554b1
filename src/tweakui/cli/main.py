"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from tweakui import __version__

from .commands import convert, hsv, inspect

logger = logging.getLogger(__name__)

_HANDLER_NAME = "tweakui-cli"


def setup_logging(verbose: int, log_file: Optional[Path]) -> list[logging.Handler]:
    """
    Configure logging for the command line tools.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        log_file: Also log to this file (optional)

    Returns:
        The handlers added to the root logger
    """
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        # Rotating file handler (keeps last 5 files, max 10MB each)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,
                backupCount=5
            )
        )

    root_logger = logging.getLogger()
    teardown_logging()
    for handler in handlers:
        handler.set_name(_HANDLER_NAME)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel(level)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")
    return handlers


def teardown_logging() -> None:
    """Remove and close the handlers installed by `setup_logging`."""
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="tweakui")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Also write log messages to this file'
)
def cli(ctx, verbose: int, log_file: Optional[Path]):
    """
    tweakui - color formats and value binding for control panels.

    Converts colors between the storage formats a color control can be
    bound to, and shows how format descriptors are interpreted.

    \b
    Format descriptors:
      rgb, #rgba        hex string      '#ff8000'
      rgb(), rgba()     CSS function    'rgba(255, 128, 0, 0.5)'
      0xrgb             packed integer  0x0080ff (first channel in the low byte)
      []rgb, [n]rgba    list            [255, 128, 0] / [1.0, 0.5, 0.0, 1.0]
      {}rgb, {n}rgb     mapping         {"r": 255, "g": 128, "b": 0}

    \b
    Examples:
      # Hex to CSS
      tweakui convert '#ff8000' --to 'rgba()'

      # Normalized list to packed integer
      tweakui convert '[1, 0.5, 0]' --from '[n]rgb' --to 0xrgb

      # What does a descriptor mean?
      tweakui inspect '{n}rgba'
    """
    setup_logging(verbose, log_file)
    ctx.call_on_close(teardown_logging)


cli.add_command(convert)
cli.add_command(hsv)
cli.add_command(inspect)

if __name__ == "__main__":
    cli()
