"""The ``rangeix`` command.

A Click-Extra group that sets up console logging and then dispatches to the
range commands defined in `rangeix.entrypoints.cli.ranges`::

    $ rangeix kinds
    $ rangeix size u8 0 255
    $ rangeix -v enumerate char a e
    $ rangeix index --checked u8 12 0 9
"""

import logging

import click
import click_extra as clickx

from rangeix import __version__
from rangeix.logging import configure_logging, log_startup, verbosity

from .helpers.log_level_parser import parse_log_level
from .ranges import contains, enumerate_cmd, index, kinds_cmd, size

logger = logging.getLogger(__name__)


@clickx.extra_group(
    version=__version__,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option("-v", "--verbose", count=True, help="More log output (repeatable).")
@click.option("-q", "--quiet", count=True, help="Less log output (repeatable).")
@click.option(
    "-L",
    "--logger-level",
    "overrides",
    multiple=True,
    metavar="NAME=LEVEL",
    callback=parse_log_level,
    envvar="RANGEIX_LOGGER_LEVELS",
    show_envvar=True,
    help="Level for one logger, e.g. -L rangeix.adapters=DEBUG.",
)
@clickx.pass_context
def rangeix(
    ctx: click.Context, verbose: int, quiet: int, overrides: dict[str, int]
) -> None:
    """Explore ranges of the primitive index-like kinds.

    Count the values between two bounds, find the offset of a value, test
    membership, or list every value in ascending order.
    """
    level = verbosity(verbose, quiet)
    configure_logging(level, color=ctx.color is not False, overrides=overrides)
    log_startup(logger, level=level, overrides=overrides)
    ctx.call_on_close(logging.shutdown)


for command in (kinds_cmd, size, index, contains, enumerate_cmd):
    rangeix.add_command(command)
