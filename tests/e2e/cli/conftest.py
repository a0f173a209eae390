"""Fixtures for end-to-end tests of the ``rangeix`` command."""

import logging

import pytest
from click.testing import CliRunner

from rangeix.entrypoints.cli.main import rangeix

# pylint: disable=redefined-outer-name


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo the logging configuration the CLI installs on each invocation.

    Covers the root handlers and level plus any `-L` per-logger levels.
    """
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    overridden = {
        name: logging.getLogger(name).level
        for name in ("click_extra", "rangeix.entrypoints")
    }
    try:
        yield
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
        for name, lvl in overridden.items():
            logging.getLogger(name).setLevel(lvl)


@pytest.fixture
def invoke(runner, monkeypatch):
    """Invoke ``rangeix`` with the given arguments in a clean environment.

    Removes RANGEIX_* variables that would change defaults, then returns a
    callable ``invoke(*args, env=None)`` that yields the Click result.
    """
    for var in ("RANGEIX_ENUMERATE_LIMIT", "RANGEIX_LOGGER_LEVELS"):
        monkeypatch.delenv(var, raising=False)

    def _invoke(*args: str, env: dict[str, str] | None = None):
        return runner.invoke(rangeix, list(args), env=env)

    return _invoke
