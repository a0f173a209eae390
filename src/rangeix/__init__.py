"""rangeix

A capability contract for index-like values: types whose inclusive ranges can
be enumerated in order and whose members map to dense integer offsets.
Ships reference instances for integers and characters.
"""

from rangeix.adapters import (
    CHAR,
    CODE_POINT,
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
    CharIx,
    EnumIx,
    IntIx,
    IntLikeIx,
    OrdinalIx,
    get_ix,
)
from rangeix.interfaces import (
    IndexOutOfRangeError,
    Ix,
    IxError,
    PreconditionViolation,
    UndefinedRangeSizeError,
    UnknownKindError,
    ValueNotInDomainError,
)

__all__ = [
    "__version__",
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
    "IndexOutOfRangeError",
    "IntIx",
    "IntLikeIx",
    "Ix",
    "IxError",
    "OrdinalIx",
    "PreconditionViolation",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "USIZE",
    "UndefinedRangeSizeError",
    "UnknownKindError",
    "ValueNotInDomainError",
    "get_ix",
]
__version__ = "0.1.0"
