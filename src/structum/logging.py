"""Logging helpers for applications using Structum.

The library itself only emits records through module-level loggers under the
``structum`` namespace. This module provides the opt-in console handler, built
on Rich, and a startup summary used by `structum.bootstrap`.
"""

from __future__ import annotations

import logging
import platform
import sys
from typing import TYPE_CHECKING, Literal, TypeAlias

import ulid
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

PROJECT_LOGGER = "structum"


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr. In debug mode the handler is set to DEBUG
    and includes timestamps, logger names and source file/line information.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting.
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to a logger.
    """

    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = "%(message)s" if not debug_mode else "%(asctime)s %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))

    return handler


def attach_console_handler(handler: logging.Handler, level: int) -> Logger:
    """Attach `handler` to the project logger, replacing a previous RichHandler.

    Returns:
        The project logger.
    """
    project_logger = logging.getLogger(PROJECT_LOGGER)
    for existing in list(project_logger.handlers):
        if isinstance(existing, RichHandler):
            project_logger.removeHandler(existing)
    project_logger.addHandler(handler)
    project_logger.setLevel(level)
    return project_logger


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int | None,
    id_strategy: str,
) -> None:
    """Log a one-line summary of the wiring, then DEBUG diagnostics.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Library version string to display.
        level: Console logging level, or None if console logging is off.
        id_strategy: Name of the identifier strategy that was installed.
    """

    logger.info(
        "STRUCTUM %s, id-strategy=%s, console=%s",
        app_version,
        id_strategy,
        logging.getLevelName(level) if level is not None else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("ulid-py: %s", getattr(ulid, "__version__", "<unknown>"))
