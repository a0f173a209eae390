"""Global pytest configuration for rangeix.

Applies a default mark to every test according to the top-level directory it
lives in (`tests/unit/` → ``unit``, `tests/contract/` → ``contract``,
`tests/e2e/` → ``e2e``), so suites can be selected with ``-m``.
"""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
DEFAULT_MARKS = {
    TESTS_ROOT / "unit": "unit",
    TESTS_ROOT / "contract": "contract",
    TESTS_ROOT / "e2e": "e2e",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the directory's default mark to items that do not already carry it."""
    for item in items:
        path = item.path.resolve()
        for root, mark_name in DEFAULT_MARKS.items():
            if root not in path.parents:
                continue
            if not any(marker.name == mark_name for marker in item.iter_markers()):
                item.add_marker(getattr(pytest.mark, mark_name))
