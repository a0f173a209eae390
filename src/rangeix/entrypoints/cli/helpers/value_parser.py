"""Parsing and display of range values on the command line.

Integers accept Python integer literals (``-5``, ``0xff``, ``1_000``).
Characters accept either the character itself or ``U+XXXX`` notation.
Non-printable characters are displayed in ``U+XXXX`` notation.
"""

import re
from typing import Any

import click

from rangeix.adapters.chars import CharIx
from rangeix.adapters.integers import IntIx
from rangeix.adapters.ordinal import OrdinalIx
from rangeix.interfaces.errors import ValueNotInDomainError

_CODE_POINT_RE = re.compile(r"^[Uu]\+([0-9A-Fa-f]{1,6})$")


def _parse_int(text: str) -> int:
    try:
        return int(text.strip(), 0)
    except ValueError as e:
        raise click.BadParameter(f"Expected an integer, got {text!r}") from e


def _parse_char(text: str) -> str:
    if len(text) == 1:
        return text
    if (m := _CODE_POINT_RE.match(text.strip())) is None:
        raise click.BadParameter(
            f"Expected a single character or U+XXXX, got {text!r}"
        )
    try:
        return chr(int(m.group(1), 16))
    except ValueError as e:
        raise click.BadParameter(f"Code point out of range: {text!r}") from e


def parse_value(ix: OrdinalIx, text: str) -> Any:
    """Parse ``text`` into a value of the type described by ``ix``.

    Args:
        ix: The instance the value belongs to.
        text: Raw command-line argument.

    Returns:
        The parsed value, already checked against the instance's domain.

    Raises:
        click.BadParameter: If the text does not parse or the value is outside
            the instance's domain.
    """
    if isinstance(ix, IntIx):
        value = _parse_int(text)
    elif isinstance(ix, CharIx):
        value = _parse_char(text)
    else:
        raise click.BadParameter(f"Kind '{ix.name}' cannot be parsed from text")
    try:
        ix.ordinal(value)
    except ValueNotInDomainError as e:
        raise click.BadParameter(str(e)) from e
    return value


def format_value(value: Any) -> str:
    """Render a value for one-per-line output."""
    if isinstance(value, str) and not value.isprintable():
        return f"U+{ord(value):04X}"
    return str(value)
