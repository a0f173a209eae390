"""Fixtures for Ix contract tests."""

import pytest

from tests.fixtures.ixgen import CASES, IxCase


@pytest.fixture(scope="module", params=sorted(CASES))
def ix_case(request: pytest.FixtureRequest) -> IxCase:
    """Return the `IxCase` for every instance under contract test.

    Covers every registered primitive plus the integer-like and enum
    instances. Module scope keeps the fixture usable from Hypothesis tests;
    cases are immutable so sharing them is safe.
    """
    return CASES[request.param]
