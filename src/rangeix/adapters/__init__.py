"""Concrete `Ix` instances.

Primitive instances (fixed-width and unbounded integers, characters) plus the
integer-encoded instances for user types. Look primitives up by name with
`rangeix.adapters.registry.get_ix`.
"""

from .chars import CHAR, CODE_POINT, CharIx
from .int_like import EnumIx, IntLikeIx
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
    IntIx,
)
from .ordinal import OrdinalIx
from .registry import get_ix, kinds

__all__ = [
    "CHAR",
    "CODE_POINT",
    "CharIx",
    "EnumIx",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "INT",
    "ISIZE",
    "IntIx",
    "IntLikeIx",
    "OrdinalIx",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "USIZE",
    "get_ix",
    "kinds",
]
