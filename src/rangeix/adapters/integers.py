"""`Ix` instances for integers.

Provides `IntIx` for fixed-width two's-complement and unsigned integers, plus
`INT` for unbounded Python integers. Any value implementing ``__index__``
(other than `bool`) is accepted and `range` yields plain `int` objects; a
fixed-width instance only restricts which integers are members of its domain.
"""

from __future__ import annotations

import operator

from .ordinal import OrdinalIx


class IntIx(OrdinalIx[int]):
    """Integers of a given bit width and signedness.

    Args:
        bits: Width in bits, or None for unbounded integers.
        signed: Whether the type is two's-complement signed.
        name: Display name; derived from width and signedness when omitted
            (e.g. ``"i32"``, ``"u8"``, ``"int"``).

    Raises:
        ValueError: If ``bits`` is not a positive integer.
    """

    def __init__(
        self, bits: int | None = None, *, signed: bool = True, name: str | None = None
    ) -> None:
        if bits is not None and bits <= 0:
            raise ValueError(f"bits must be positive, got {bits}")
        self.bits = bits
        self.signed = signed
        if bits is None:
            self._lowest: int | None = None
            self._highest: int | None = None
        elif signed:
            self._lowest = -(1 << (bits - 1))
            self._highest = (1 << (bits - 1)) - 1
        else:
            self._lowest = 0
            self._highest = (1 << bits) - 1
        if name is None:
            name = "int" if bits is None else f"{'i' if signed else 'u'}{bits}"
        self.name = name

    @property
    def lowest(self) -> int | None:
        return self._lowest

    @property
    def highest(self) -> int | None:
        return self._highest

    def ordinal(self, value: int) -> int:
        if isinstance(value, bool):
            raise self._reject(value, "expected an int")
        try:
            n = operator.index(value)
        except TypeError as e:
            raise self._reject(value, "expected an int") from e
        if self._lowest is not None and n < self._lowest:
            raise self._reject(value, f"below minimum {self._lowest}")
        if self._highest is not None and n > self._highest:
            raise self._reject(value, f"above maximum {self._highest}")
        return n

    def from_ordinal(self, ordinal: int) -> int:
        return ordinal


I8 = IntIx(8)
I16 = IntIx(16)
I32 = IntIx(32)
I64 = IntIx(64)
I128 = IntIx(128)
ISIZE = IntIx(64, name="isize")

U8 = IntIx(8, signed=False)
U16 = IntIx(16, signed=False)
U32 = IntIx(32, signed=False)
U64 = IntIx(64, signed=False)
U128 = IntIx(128, signed=False)
USIZE = IntIx(64, signed=False, name="usize")

INT = IntIx()
