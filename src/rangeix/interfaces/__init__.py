"""Interfaces (contracts) for rangeix.

Defines the framework-free `Ix` contract and its error taxonomy. Concrete
instances live in `rangeix.adapters`.

Dependency rule: this package is independent. Do not import from any other
`rangeix.*` module here.
"""

from .errors import (
    IndexOutOfRangeError,
    IxError,
    PreconditionViolation,
    UndefinedRangeSizeError,
    UnknownKindError,
    ValueNotInDomainError,
)
from .ix import Ix

__all__ = [
    "Ix",
    "IxError",
    "IndexOutOfRangeError",
    "PreconditionViolation",
    "UndefinedRangeSizeError",
    "UnknownKindError",
    "ValueNotInDomainError",
]
