"""Partial-order comparison helpers.

Helpers for `Ix` implementations over types whose ordering may be undefined
for some pairs (NaN-like values, inclusion orders). Python signals an
incomparable pair by answering ``False`` to both ``a <= b`` and ``b <= a``;
these helpers rely on that and never raise for such pairs.
"""

from typing import Any


def comparable(a: Any, b: Any) -> bool:
    """Return True if the ordering between ``a`` and ``b`` is defined."""
    return bool(a <= b or b <= a)


def within(ix: Any, lower: Any, upper: Any) -> bool:
    """Return True iff ``lower <= ix <= upper`` with both comparisons defined.

    Args:
        ix: The candidate value.
        lower: Inclusive lower bound.
        upper: Inclusive upper bound.

    Returns:
        bool: False when either comparison does not hold, including when it is
        undefined.
    """
    return bool(lower <= ix and ix <= upper)
