"""`Ix` instances for characters.

Values are one-character strings. Two instances are provided:

* `CHAR` ranges over Unicode scalar values. The surrogate block
  U+D800..U+DFFF is not part of the domain, so a range that spans it skips
  the block and offsets stay dense across the gap.
* `CODE_POINT` ranges over every code point U+0000..U+10FFFF, surrogates
  included, matching what a Python `str` can hold.
"""

from __future__ import annotations

from .ordinal import OrdinalIx

MAX_CODE_POINT = 0x10FFFF
SURROGATE_FIRST = 0xD800
SURROGATE_LAST = 0xDFFF
SURROGATE_COUNT = SURROGATE_LAST - SURROGATE_FIRST + 1


class CharIx(OrdinalIx[str]):
    """Single characters ordered by code point.

    Args:
        skip_surrogates: Exclude the surrogate block from the domain.
        name: Display name; ``"char"`` or ``"codepoint"`` when omitted.
    """

    def __init__(self, *, skip_surrogates: bool = True, name: str | None = None) -> None:
        self.skip_surrogates = skip_surrogates
        if name is None:
            name = "char" if skip_surrogates else "codepoint"
        self.name = name

    @property
    def lowest(self) -> str:
        return chr(0)

    @property
    def highest(self) -> str:
        return chr(MAX_CODE_POINT)

    def ordinal(self, value: str) -> int:
        if not isinstance(value, str) or len(value) != 1:
            raise self._reject(value, "expected a single character")
        code_point = ord(value)
        if not self.skip_surrogates:
            return code_point
        if SURROGATE_FIRST <= code_point <= SURROGATE_LAST:
            raise self._reject(value, "surrogate code points are not scalar values")
        if code_point > SURROGATE_LAST:
            return code_point - SURROGATE_COUNT
        return code_point

    def from_ordinal(self, ordinal: int) -> str:
        if self.skip_surrogates and ordinal >= SURROGATE_FIRST:
            return chr(ordinal + SURROGATE_COUNT)
        return chr(ordinal)


CHAR = CharIx()
CODE_POINT = CharIx(skip_surrogates=False)
