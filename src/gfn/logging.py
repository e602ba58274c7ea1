"""Logging helpers for applications that want to see gfn diagnostics.

gfn itself never configures logging: the package logger only carries a
``NullHandler``. Modules log contract violations at DEBUG right before they
raise. This module provides a Rich console handler and a one-call setup for
callers that want those records on screen.
"""

from __future__ import annotations

import logging
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from .config import get_log_level

PROJECT_PREFIX = "gfn"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr. In debug mode the handler is set to DEBUG
    and includes source file/line information and the logger name.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting (show_path, logger names).
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to a logger.
    """
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
    fmt = "%(message)s" if not debug_mode else "%(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))
    return handler


def configure_logging(
    level: int | None = None, debug_mode: bool = False, color: bool = True
) -> logging.Logger:
    """Attach a Rich console handler to the ``gfn`` logger.

    Repeated calls replace the previously attached Rich handler instead of
    stacking a new one.

    Args:
        level: Console level. Defaults to the ``GFN_LOG_LEVEL`` setting.
        debug_mode: Forwarded to :func:`config_console_handler`.
        color: Forwarded to :func:`config_console_handler`.

    Returns:
        The configured ``gfn`` logger.
    """
    if level is None:
        level = get_log_level()

    logger = logging.getLogger(PROJECT_PREFIX)
    for existing in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(existing)

    handler = config_console_handler(level=level, debug_mode=debug_mode, color=color)
    logger.addHandler(handler)
    logger.setLevel(handler.level)
    return logger
