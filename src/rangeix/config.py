"""Configuration utilities for rangeix.

This module centralizes small helpers and constants related to configuration
read from the environment.
"""

import os

ENUMERATE_LIMIT_ENV = "RANGEIX_ENUMERATE_LIMIT"  # pragma: no mutate
DEFAULT_ENUMERATE_LIMIT = 1000


class InvalidEnumerateLimitError(Exception):
    """Raised when RANGEIX_ENUMERATE_LIMIT is not a non-negative integer."""

    def __init__(self, raw: str) -> None:
        super().__init__(
            f"{ENUMERATE_LIMIT_ENV} must be a non-negative integer, got {raw!r}."
        )
        self.raw = raw


def get_enumerate_limit() -> int:
    """Get the default number of values `rangeix enumerate` prints.

    Returns:
        The value of `RANGEIX_ENUMERATE_LIMIT`, or `DEFAULT_ENUMERATE_LIMIT`
        when it is unset or empty. `0` means no limit.

    Raises:
        InvalidEnumerateLimitError: If the variable is set to anything other
            than a non-negative integer.
    """
    if not (raw := os.environ.get(ENUMERATE_LIMIT_ENV, "").strip()):
        return DEFAULT_ENUMERATE_LIMIT
    try:
        limit = int(raw)
    except ValueError as e:
        raise InvalidEnumerateLimitError(raw) from e
    if limit < 0:
        raise InvalidEnumerateLimitError(raw)
    return limit
