"""`Ix` instances derived from an integer encoding supplied by the caller.

`IntLikeIx` covers newtypes that convert losslessly to and from an integer
(a wrapper around an id, an `IntEnum`, anything implementing ``__index__``).
`EnumIx` covers plain `enum.Enum` classes, ordered by declaration.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from enum import Enum
from typing import TypeVar

from rangeix.interfaces.errors import ValueNotInDomainError

from .integers import INT, IntIx
from .ordinal import OrdinalIx

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


class IntLikeIx(OrdinalIx[T]):
    """Values that round-trip losslessly through an integer instance.

    Args:
        to_int: Converts a value to its integer encoding.
        from_int: Rebuilds a value from its integer encoding.
        base: Integer instance that bounds the encoding (unbounded by default).
        name: Display name.

    Note:
        ``to_int`` rejects a foreign value by raising `TypeError`, `ValueError`
        or `AttributeError`. It must be strictly monotonic with respect to the
        value type's ordering and ``from_int(to_int(v)) == v`` must hold;
        neither is checked.
    """

    def __init__(
        self,
        to_int: Callable[[T], int],
        from_int: Callable[[int], T],
        *,
        base: IntIx = INT,
        name: str = "int-like",
    ) -> None:
        self._to_int = to_int
        self._from_int = from_int
        self.base = base
        self.name = name

    @classmethod
    def of(cls, value_type: Callable[[int], T], *, base: IntIx = INT) -> IntLikeIx[T]:
        """Build an instance for a type that implements ``__index__``.

        Values are encoded with `operator.index` and rebuilt by calling
        ``value_type`` with the integer.
        """
        name = getattr(value_type, "__name__", "int-like")
        return cls(operator.index, value_type, base=base, name=name)

    @property
    def lowest(self) -> T | None:
        return None if self.base.lowest is None else self._from_int(self.base.lowest)

    @property
    def highest(self) -> T | None:
        return None if self.base.highest is None else self._from_int(self.base.highest)

    def ordinal(self, value: T) -> int:
        try:
            encoded = self._to_int(value)
        except (AttributeError, TypeError, ValueError) as e:
            raise self._reject(value, f"cannot convert to int ({e})") from e
        try:
            return self.base.ordinal(encoded)
        except ValueNotInDomainError as e:
            raise self._reject(value, e.reason) from e

    def from_ordinal(self, ordinal: int) -> T:
        return self._from_int(self.base.from_ordinal(ordinal))


class EnumIx(OrdinalIx[E]):
    """Members of an `enum.Enum` class, ordered by declaration.

    Aliases share their canonical member's position and are never produced by
    `range`. `enum.Flag` values that are not canonical members (a multi-bit
    alias or a union of flags) are outside the domain.

    Raises:
        ValueError: If the enum class has no members.
    """

    def __init__(self, enum_cls: type[E], *, name: str | None = None) -> None:
        members = list(enum_cls)
        if not members:
            raise ValueError(f"{enum_cls.__name__} has no members")
        self.enum_cls = enum_cls
        self._members = members
        self._positions = {member: position for position, member in enumerate(members)}
        self.name = name or enum_cls.__name__

    @property
    def lowest(self) -> E:
        return self._members[0]

    @property
    def highest(self) -> E:
        return self._members[-1]

    def ordinal(self, value: E) -> int:
        if not isinstance(value, self.enum_cls):
            raise self._reject(value, f"expected a {self.enum_cls.__name__} member")
        # Flag combinations are instances without a declared position
        if (position := self._positions.get(value)) is None:
            raise self._reject(value, "not a canonical member")
        return position

    def from_ordinal(self, ordinal: int) -> E:
        return self._members[ordinal]
