"""Shared `Ix` implementation for types with a dense integer encoding.

Every primitive instance maps its values monotonically and without gaps onto
Python integers ("ordinals"). Once that mapping exists the whole contract is
integer arithmetic: membership compares ordinals, the offset is a difference,
the size is ``last - first + 1`` and enumeration maps `from_ordinal` over a
builtin range.

Python integers have arbitrary precision, so none of this can overflow or
wrap, even for ranges that span a fixed-width type's entire domain.
"""

from __future__ import annotations

import abc
import builtins
from collections.abc import Iterator
from typing import TypeVar

from rangeix.interfaces.errors import ValueNotInDomainError
from rangeix.interfaces.ix import Ix
from rangeix.utils.ordering import within

T = TypeVar("T")


class OrdinalIx(Ix[T]):
    """Base for instances whose values encode densely as integers.

    Subclasses implement `ordinal` (validating the value) and `from_ordinal`.
    Domain violations raise `ValueNotInDomainError` from every operation.
    """

    @abc.abstractmethod
    def ordinal(self, value: T) -> int:
        """Return the dense integer encoding of ``value``.

        Raises:
            ValueNotInDomainError: If ``value`` is not a member of the type.
        """

    @abc.abstractmethod
    def from_ordinal(self, ordinal: int) -> T:
        """Return the value whose encoding is ``ordinal``."""

    @property
    def lowest(self) -> T | None:
        """Smallest representable value, or None when unbounded below."""
        return None

    @property
    def highest(self) -> T | None:
        """Largest representable value, or None when unbounded above."""
        return None

    def range(self, lower: T, upper: T) -> Iterator[T]:
        first, last = self.ordinal(lower), self.ordinal(upper)
        return map(self.from_ordinal, builtins.range(first, last + 1))

    def index_checked(self, ix: T, lower: T, upper: T) -> int | None:
        n, first, last = self.ordinal(ix), self.ordinal(lower), self.ordinal(upper)
        if not within(n, first, last):
            return None
        return n - first

    def in_range(self, ix: T, lower: T, upper: T) -> bool:
        return within(self.ordinal(ix), self.ordinal(lower), self.ordinal(upper))

    def range_size_checked(self, lower: T, upper: T) -> int | None:
        return max(0, self.ordinal(upper) - self.ordinal(lower) + 1)

    def _reject(self, value: object, reason: str) -> ValueNotInDomainError:
        return ValueNotInDomainError(self.name, value, reason)
