"""rangeix range commands: explore the primitive instances from a shell.

Each command takes a KIND (a registered primitive such as ``u8``, ``i64`` or
``char``) followed by values parsed for that kind.

Behavior
- Results go to **stdout**, one value per line, so output can be piped.
- Notices (e.g. truncated enumerations) go to **stderr**.

Failure modes
- Unknown KIND or unparsable value → usage error (exit status 2).
- ``index`` on a value outside the range → ``ClickException`` (exit status 1),
  unless ``--checked`` is given, in which case ``none`` is printed.
- Invalid ``RANGEIX_ENUMERATE_LIMIT`` → ``ClickException``.
"""

from __future__ import annotations

import itertools
import logging

import click
from rich.console import Console
from rich.table import Table

from rangeix import config
from rangeix.adapters.ordinal import OrdinalIx
from rangeix.adapters.registry import get_ix, kinds
from rangeix.interfaces.errors import PreconditionViolation, UnknownKindError

from .helpers import format_value, parse_value, warn

logger = logging.getLogger(__name__)

UNBOUNDED = "unbounded"  # pragma: no mutate

# Let negative literals such as -128 through as arguments
VALUE_ARGS = {"ignore_unknown_options": True}


class KindParamType(click.ParamType):
    """Click parameter type resolving a kind name to its `Ix` instance."""

    name = "kind"

    def convert(self, value, param, ctx) -> OrdinalIx:
        if isinstance(value, OrdinalIx):
            return value
        try:
            return get_ix(value)
        except UnknownKindError as e:
            self.fail(str(e), param, ctx)


KIND = KindParamType()


@click.command(name="kinds")
def kinds_cmd() -> None:
    """List the registered primitive kinds and their domains."""
    table = Table(title="Primitive kinds")
    table.add_column("kind", no_wrap=True)
    for column in ("lowest", "highest", "size"):
        table.add_column(column, justify="right", overflow="fold")
    for name in kinds():
        ix = get_ix(name)
        if ix.lowest is None or ix.highest is None:
            table.add_row(name, UNBOUNDED, UNBOUNDED, UNBOUNDED)
            continue
        table.add_row(
            name,
            format_value(ix.lowest),
            format_value(ix.highest),
            str(ix.range_size(ix.lowest, ix.highest)),
        )
    Console().print(table)


@click.command(context_settings=VALUE_ARGS)
@click.argument("kind", type=KIND)
@click.argument("lower")
@click.argument("upper")
def size(kind: OrdinalIx, lower: str, upper: str) -> None:
    """Print the number of values in [LOWER, UPPER]."""
    lo, hi = parse_value(kind, lower), parse_value(kind, upper)
    click.echo(kind.range_size(lo, hi))


@click.command(context_settings=VALUE_ARGS)
@click.argument("kind", type=KIND)
@click.argument("ix")
@click.argument("lower")
@click.argument("upper")
@click.option(
    "--checked",
    is_flag=True,
    help="Print 'none' instead of failing when IX is outside the range.",
)
def index(kind: OrdinalIx, ix: str, lower: str, upper: str, checked: bool) -> None:
    """Print the zero-based offset of IX in [LOWER, UPPER]."""
    value = parse_value(kind, ix)
    lo, hi = parse_value(kind, lower), parse_value(kind, upper)
    if checked:
        offset = kind.index_checked(value, lo, hi)
        click.echo("none" if offset is None else offset)
        return
    try:
        click.echo(kind.index(value, lo, hi))
    except PreconditionViolation as e:
        raise click.ClickException(str(e)) from e


@click.command(context_settings=VALUE_ARGS)
@click.argument("kind", type=KIND)
@click.argument("ix")
@click.argument("lower")
@click.argument("upper")
def contains(kind: OrdinalIx, ix: str, lower: str, upper: str) -> None:
    """Print 'true' if IX lies in [LOWER, UPPER], otherwise 'false'."""
    value = parse_value(kind, ix)
    lo, hi = parse_value(kind, lower), parse_value(kind, upper)
    click.echo("true" if kind.in_range(value, lo, hi) else "false")


@click.command(name="enumerate", context_settings=VALUE_ARGS)
@click.argument("kind", type=KIND)
@click.argument("lower")
@click.argument("upper")
@click.option(
    "--limit",
    "-n",
    type=click.IntRange(min=0),
    default=None,
    help=(
        "Print at most N values (0 for no limit). "
        f"Defaults to {config.ENUMERATE_LIMIT_ENV} or "
        f"{config.DEFAULT_ENUMERATE_LIMIT}."
    ),
)
def enumerate_cmd(kind: OrdinalIx, lower: str, upper: str, limit: int | None) -> None:
    """Print every value in [LOWER, UPPER] in ascending order."""
    lo, hi = parse_value(kind, lower), parse_value(kind, upper)
    if limit is None:
        try:
            limit = config.get_enumerate_limit()
        except config.InvalidEnumerateLimitError as e:
            raise click.ClickException(str(e)) from e

    total = kind.range_size(lo, hi)
    logger.info("Enumerating %d value(s) of kind %s", total, kind.name)
    for value in itertools.islice(kind.range(lo, hi), limit or None):
        click.echo(format_value(value))
    if limit and total > limit:
        warn(
            f"Output truncated after {limit} of {total} values "
            "(use --limit 0 for all)."
        )
