"""Console logging for the ``rangeix`` command.

Log records go to stderr through Rich, so values printed on stdout stay
pipeable. The root logger carries the level chosen with ``-v``/``-q``;
individual loggers may be raised or lowered with ``-L NAME=LEVEL``. Records
from other libraries are tagged with their top-level package name.
"""

from __future__ import annotations

import logging
import platform
from collections.abc import Mapping
from importlib.metadata import version

from rich.console import Console
from rich.logging import RichHandler

from rangeix import __version__, config
from rangeix.adapters.registry import kinds

PROJECT_LOGGER = "rangeix"
BASE_LEVEL = logging.WARNING


def verbosity(verbose: int = 0, quiet: int = 0) -> int:
    """Map ``-v``/``-q`` repetition counts to a logging level.

    Each ``-v`` moves one step from WARNING towards DEBUG and each ``-q`` one
    step towards CRITICAL. The result is clamped to that span.
    """
    level = BASE_LEVEL + 10 * (quiet - verbose)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


class LibraryTagFormatter(logging.Formatter):
    """Prefix messages from non-rangeix loggers with ``[package]``."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        package = record.name.partition(".")[0]
        if package == PROJECT_LOGGER:
            return message
        return f"[{package}] {message}"


def rich_handler(level: int, *, color: bool = True) -> RichHandler:
    """Build the stderr handler used by the CLI.

    At DEBUG the handler also shows the source location of each record and
    renders tracebacks with Rich.
    """
    detailed = level <= logging.DEBUG
    console = Console(stderr=True, color_system="auto" if color else None)
    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=detailed,
        rich_tracebacks=detailed,
    )
    handler.setFormatter(LibraryTagFormatter("%(message)s"))
    return handler


def configure_logging(
    level: int, *, color: bool = True, overrides: Mapping[str, int] | None = None
) -> RichHandler:
    """Route every record through one Rich handler on stderr.

    Args:
        level: Level of the root logger, inherited by loggers without
            an override.
        color: Whether the console may emit ANSI colors.
        overrides: Logger name to level; each wins over ``level`` for that
            logger and its children.

    Returns:
        The installed handler.
    """
    handler = rich_handler(level, color=color)
    logging.basicConfig(level=level, handlers=[handler], force=True)
    for name, lvl in (overrides or {}).items():
        logging.getLogger(name).setLevel(lvl)
    return handler


def _describe_limit() -> str:
    try:
        limit = config.get_enumerate_limit()
    except config.InvalidEnumerateLimitError as e:
        return f"invalid ({e})"
    return str(limit) if limit else "unlimited"


def log_startup(
    logger: logging.Logger, *, level: int, overrides: Mapping[str, int]
) -> None:
    """Summarize the session: registered kinds at INFO, settings at DEBUG."""
    registered = kinds()
    logger.info(
        "rangeix %s: %d kinds registered (console=%s)",
        __version__,
        len(registered),
        logging.getLevelName(level),
    )
    logger.debug("Kinds: %s", ", ".join(registered))
    logger.debug("Enumerate limit: %s", _describe_limit())
    logger.debug(
        "Python %s on %s; click-extra %s; rich %s",
        platform.python_version(),
        platform.system(),
        version("click-extra"),
        version("rich"),
    )
    logger.debug(
        "Logger overrides: %s",
        ", ".join(f"{n}={logging.getLevelName(v)}" for n, v in overrides.items())
        or "<none>",
    )
