"""Exceptions for range index operations.

Two tiers exist. Out-of-range lookups on the checked operations are not
errors at all: they return ``None``. Everything below `PreconditionViolation`
signals a programming error (a broken caller guarantee) and is not meant to
be caught as ordinary control flow.
"""

from typing import Any

# ============================================================================
#                               Base errors
# ============================================================================


class IxError(Exception):
    """Base class for range index errors."""


class PreconditionViolation(IxError):
    """Raised when a caller breaks the documented precondition of an operation."""


# ============================================================================
#                           Precondition violations
# ============================================================================


class IndexOutOfRangeError(PreconditionViolation):
    """Raised by `Ix.index` when the value is not a member of the range.

    Attributes:
        kind (str): Name of the instance that performed the lookup.
        ix: The value that was looked up.
        lower: Inclusive lower bound of the range.
        upper: Inclusive upper bound of the range.
    """

    def __init__(self, kind: str, ix: Any, lower: Any, upper: Any) -> None:
        super().__init__(
            f"Value {ix!r} is not in range [{lower!r}, {upper!r}] for kind '{kind}'."
        )
        self.kind = kind
        self.ix = ix
        self.lower = lower
        self.upper = upper


class UndefinedRangeSizeError(PreconditionViolation):
    """Raised by `Ix.range_size` when the ordering of the bounds is undefined.

    Attributes:
        kind (str): Name of the instance that computed the size.
        lower: Inclusive lower bound of the range.
        upper: Inclusive upper bound of the range.
    """

    def __init__(self, kind: str, lower: Any, upper: Any) -> None:
        super().__init__(
            f"Ordering between bounds {lower!r} and {upper!r} is undefined "
            f"for kind '{kind}'."
        )
        self.kind = kind
        self.lower = lower
        self.upper = upper


class ValueNotInDomainError(PreconditionViolation):
    """Raised when a value cannot be represented by an instance's type.

    Attributes:
        kind (str): Name of the instance that rejected the value.
        value: The rejected value.
        reason (str): Short explanation of why the value was rejected.
    """

    def __init__(self, kind: str, value: Any, reason: str) -> None:
        super().__init__(f"Value {value!r} is not a valid '{kind}': {reason}.")
        self.kind = kind
        self.value = value
        self.reason = reason


# ============================================================================
#                               Lookup errors
# ============================================================================


class UnknownKindError(IxError, LookupError):
    """Raised when no instance is registered under the requested name.

    Attributes:
        kind (str): The requested name.
    """

    def __init__(self, kind: str, known: list[str]) -> None:
        super().__init__(
            f"Unknown kind '{kind}'. Expected one of: {', '.join(known)}."
        )
        self.kind = kind
        self.known = known
