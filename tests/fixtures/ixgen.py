"""Test data generation for `Ix` instances.

Every instance under test is described by an `IxCase`: the instance plus a
few *ordinal windows*: small spans of its dense integer encoding near the
domain minimum, near zero, around interesting boundaries and near the domain
maximum. Bounds and candidate values for a single example are always drawn
from the same window so that ranges are small enough to enumerate and values
land inside them often.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from rangeix.adapters.chars import CHAR, SURROGATE_FIRST
from rangeix.adapters.int_like import EnumIx, IntLikeIx
from rangeix.adapters.integers import U16
from rangeix.adapters.ordinal import OrdinalIx
from rangeix.adapters.registry import PRIMITIVES

WINDOW = 127
FAR = 2**80


@dataclass(frozen=True, order=True)
class Port:
    """A newtype around a TCP port number."""

    number: int

    def __index__(self) -> int:
        return self.number


class Weekday(enum.Enum):
    """A plain (non-integer) enumeration."""

    MON = "mon"
    TUE = "tue"
    WED = "wed"
    THU = "thu"
    FRI = "fri"
    SAT = "sat"
    SUN = "sun"


@dataclass(frozen=True)
class IxCase:
    """An instance under test and the ordinal windows to sample from."""

    ix: OrdinalIx
    windows: tuple[tuple[int, int], ...]

    @property
    def bounded(self) -> bool:
        return self.ix.lowest is not None and self.ix.highest is not None

    def value_at(self, ordinal: int) -> Any:
        return self.ix.from_ordinal(ordinal)

    def pairs(self) -> SearchStrategy[tuple[Any, Any]]:
        """Strategy for ``(lower, upper)`` bounds, in either order."""
        return st.sampled_from(self.windows).flatmap(
            lambda w: st.tuples(st.integers(*w), st.integers(*w))
        ).map(lambda t: (self.value_at(t[0]), self.value_at(t[1])))

    def triples(self) -> SearchStrategy[tuple[Any, Any, Any]]:
        """Strategy for ``(lower, upper, ix)``, all from one window."""
        return st.sampled_from(self.windows).flatmap(
            lambda w: st.tuples(st.integers(*w), st.integers(*w), st.integers(*w))
        ).map(lambda t: tuple(self.value_at(n) for n in t))


def _clamp(n: int, first: int, last: int) -> int:
    return max(first, min(n, last))


def windows_for(ix: OrdinalIx, *around: int) -> tuple[tuple[int, int], ...]:
    """Ordinal windows near the minimum, zero, the maximum and each ``around``."""
    if ix.lowest is None or ix.highest is None:
        return ((-WINDOW, WINDOW), (-FAR, -FAR + WINDOW), (FAR - WINDOW, FAR))

    first, last = ix.ordinal(ix.lowest), ix.ordinal(ix.highest)
    half = WINDOW // 2
    centres = [_clamp(0, first, last), *around]
    windows = [(first, min(first + WINDOW, last)), (max(last - WINDOW, first), last)]
    windows += [
        (_clamp(c - half, first, last), _clamp(c + half, first, last)) for c in centres
    ]
    return tuple(dict.fromkeys(windows))


def build_cases() -> dict[str, IxCase]:
    """Return every instance exercised by the contract suite, keyed by test id."""
    cases = {name: IxCase(ix, windows_for(ix)) for name, ix in PRIMITIVES.items()}
    # the surrogate gap is where CHAR's encoding is interesting
    cases["char"] = IxCase(CHAR, windows_for(CHAR, SURROGATE_FIRST))
    port = IntLikeIx.of(Port, base=U16)
    cases["port"] = IxCase(port, windows_for(port))
    weekday = EnumIx(Weekday)
    cases["weekday"] = IxCase(weekday, windows_for(weekday))
    return cases


CASES = build_cases()
