"""Name-based lookup of the primitive `Ix` instances."""

from __future__ import annotations

import logging

from rangeix.interfaces.errors import UnknownKindError

from .chars import CHAR, CODE_POINT
from .integers import (
    I8,
    I16,
    I32,
    I64,
    I128,
    INT,
    ISIZE,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
)
from .ordinal import OrdinalIx

logger = logging.getLogger(__name__)

PRIMITIVES: dict[str, OrdinalIx] = {
    ix.name: ix
    for ix in (
        I8,
        I16,
        I32,
        I64,
        I128,
        ISIZE,
        U8,
        U16,
        U32,
        U64,
        U128,
        USIZE,
        INT,
        CHAR,
        CODE_POINT,
    )
}


def kinds() -> list[str]:
    """Return the names of the registered primitive instances, in registry order."""
    return list(PRIMITIVES)


def get_ix(kind: str) -> OrdinalIx:
    """Look up a primitive instance by name.

    Args:
        kind: Instance name such as ``"u8"``, ``"i64"`` or ``"char"``
            (case-insensitive).

    Returns:
        OrdinalIx: The registered instance.

    Raises:
        UnknownKindError: If no instance is registered under ``kind``.
    """
    try:
        return PRIMITIVES[kind.strip().lower()]
    except KeyError as e:
        logger.debug("Lookup of unknown kind %r", kind)
        raise UnknownKindError(kind, kinds()) from e
