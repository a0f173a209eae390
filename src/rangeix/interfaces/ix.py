"""Interface for index-like values.

Defines the `Ix` abstraction: a description of how values of some ordered type
``T`` form contiguous, linearly addressable ranges. Given an inclusive range
``[lower, upper]`` an instance can decide membership, map a member to its dense
zero-based offset, count the range, and lazily enumerate it in ascending order.

An `Ix` instance describes a *type*, not a value. Downstream array- and
grid-like structures hold one and call it to translate coordinates into flat
storage offsets.

Every implementation must uphold, for all bounds ``l``, ``u`` and values ``ix``:

1. ``in_range(ix, l, u)`` iff ``ix`` is produced by ``range(l, u)``.
2. If ``in_range(ix, l, u)``, the ``index(ix, l, u)``-th element of
   ``range(l, u)`` is ``ix``.
3. Mapping ``index(., l, u)`` over ``range(l, u)`` yields ``0, 1, ...,
   range_size(l, u) - 1``.
4. ``range_size(l, u)`` is the number of elements of ``range(l, u)``.

Empty ranges (``upper < lower``) enumerate nothing, contain nothing and have
size ``0``. ``range_size_checked`` returns ``None`` only when the ordering
between the bounds is undefined.
"""

from __future__ import annotations

import abc
import logging
from collections.abc import Iterator
from typing import Generic, TypeVar

from .errors import IndexOutOfRangeError, UndefinedRangeSizeError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Ix(abc.ABC, Generic[T]):
    """Contract for values that permit contiguous, indexable subranges."""

    #: Short name used in diagnostics and for registry lookups.
    name: str = "ix"

    @abc.abstractmethod
    def range(self, lower: T, upper: T) -> Iterator[T]:
        """Enumerate a range in ascending order.

        Args:
            lower: Inclusive lower bound.
            upper: Inclusive upper bound.

        Returns:
            Iterator[T]: A fresh, single-pass iterator that yields every member of
            ``[lower, upper]`` (both bounds included) in ascending order. Empty
            when ``upper < lower``. Each call returns an independent iterator.
        """

    @abc.abstractmethod
    def index_checked(self, ix: T, lower: T, upper: T) -> int | None:
        """Get the position of a value inside a range.

        Args:
            ix: The value to locate.
            lower: Inclusive lower bound.
            upper: Inclusive upper bound.

        Returns:
            int | None: The zero-based offset of ``ix`` in ``[lower, upper]``, or
            ``None`` when ``ix`` is not a member (including when it cannot be
            compared to the bounds).
        """

    @abc.abstractmethod
    def in_range(self, ix: T, lower: T, upper: T) -> bool:
        """Check if a value lies inside a range.

        Returns:
            bool: True iff ``lower <= ix <= upper`` holds. Incomparable values
            are never in range.
        """

    @abc.abstractmethod
    def range_size_checked(self, lower: T, upper: T) -> int | None:
        """Get the number of values in a range.

        Returns:
            int | None: The size of ``[lower, upper]``; ``0`` for an empty range,
            ``None`` when the ordering between the bounds is undefined.
        """

    def index(self, ix: T, lower: T, upper: T) -> int:
        """Get the position of a value the caller guarantees is in the range.

        Args:
            ix: The value to locate.
            lower: Inclusive lower bound.
            upper: Inclusive upper bound.

        Returns:
            int: The zero-based offset of ``ix`` in ``[lower, upper]``.

        Raises:
            IndexOutOfRangeError: If ``ix`` is not in the range.
        """
        offset = self.index_checked(ix, lower, upper)
        if offset is None:
            logger.debug(
                "%s: index precondition violated for %r in [%r, %r]",
                self.name,
                ix,
                lower,
                upper,
            )
            raise IndexOutOfRangeError(self.name, ix, lower, upper)
        return offset

    def range_size(self, lower: T, upper: T) -> int:
        """Get the number of values in a range.

        Raises:
            UndefinedRangeSizeError: If the bounds cannot be ordered.
        """
        size = self.range_size_checked(lower, upper)
        if size is None:
            logger.debug(
                "%s: range size undefined for [%r, %r]", self.name, lower, upper
            )
            raise UndefinedRangeSizeError(self.name, lower, upper)
        return size

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
