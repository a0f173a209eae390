"""Unit tests for rangeix.interfaces.errors."""

import pytest

from rangeix.interfaces.errors import (
    IndexOutOfRangeError,
    IxError,
    PreconditionViolation,
    UndefinedRangeSizeError,
    UnknownKindError,
    ValueNotInDomainError,
)

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    "error",
    [
        IndexOutOfRangeError("u8", 10, 5, 9),
        UndefinedRangeSizeError("reading", 1.0, float("nan")),
        ValueNotInDomainError("u8", 256, "above maximum 255"),
    ],
)
def test_precondition_errors_share_base(error):
    """All fatal errors derive from PreconditionViolation and IxError."""
    assert isinstance(error, PreconditionViolation)
    assert isinstance(error, IxError)


def test_index_out_of_range_message():
    err = IndexOutOfRangeError("u8", 10, 5, 9)
    assert str(err) == "Value 10 is not in range [5, 9] for kind 'u8'."


def test_undefined_range_size_message():
    err = UndefinedRangeSizeError("reading", 1.0, float("nan"))
    assert str(err) == (
        "Ordering between bounds 1.0 and nan is undefined for kind 'reading'."
    )


def test_value_not_in_domain_message_and_attributes():
    err = ValueNotInDomainError("char", "ab", "expected a single character")
    assert str(err) == "Value 'ab' is not a valid 'char': expected a single character."
    assert err.kind == "char"
    assert err.value == "ab"
    assert err.reason == "expected a single character"


def test_unknown_kind_is_a_lookup_error():
    """UnknownKindError can be caught as a LookupError but is not fatal-tier."""
    err = UnknownKindError("u7", ["u8", "u16"])
    assert isinstance(err, LookupError)
    assert not isinstance(err, PreconditionViolation)
    assert str(err) == "Unknown kind 'u7'. Expected one of: u8, u16."
    assert err.known == ["u8", "u16"]
