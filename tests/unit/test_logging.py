"""Unit tests for gfn.logging module."""

import logging

import pytest
from rich.logging import RichHandler

from gfn import config
from gfn import logging as gfn_logging


@pytest.fixture(name="gfn_logger")
def _gfn_logger():
    """Yield the package logger and restore its handlers and level afterwards."""
    logger = logging.getLogger(gfn_logging.PROJECT_PREFIX)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)


def test_package_logger_has_null_handler():
    """Importing gfn never configures output."""
    logger = logging.getLogger("gfn")
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_console_handler_defaults():
    """The default handler logs INFO with the plain message format."""
    handler = gfn_logging.config_console_handler()
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.INFO
    assert handler.formatter is not None
    assert handler.formatter._fmt == "%(message)s"  # pylint: disable=protected-access
    assert handler.console.stderr


def test_console_handler_debug_mode():
    """Debug mode forces DEBUG and prefixes the logger name."""
    handler = gfn_logging.config_console_handler(level=logging.ERROR, debug_mode=True)
    assert handler.level == logging.DEBUG
    assert handler.formatter is not None
    assert handler.formatter._fmt == "%(name)s: %(message)s"  # pylint: disable=protected-access


def test_console_handler_without_color():
    """Color can be switched off."""
    handler = gfn_logging.config_console_handler(color=False)
    assert handler.console.color_system is None


def test_configure_logging_replaces_handler(gfn_logger: logging.Logger):
    """Repeated calls keep a single Rich handler on the package logger."""
    gfn_logging.configure_logging(level=logging.INFO)
    logger = gfn_logging.configure_logging(level=logging.DEBUG)
    assert logger is gfn_logger
    rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert len(rich_handlers) == 1
    assert rich_handlers[0].level == logging.DEBUG
    assert logger.level == logging.DEBUG


def test_configure_logging_reads_environment(
    gfn_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
):
    """Without an explicit level the GFN_LOG_LEVEL setting is used."""
    monkeypatch.setenv(config.LOG_LEVEL_ENV, "error")
    gfn_logging.configure_logging()
    assert gfn_logger.level == logging.ERROR


def test_configure_logging_rejects_bad_environment(
    gfn_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
):
    """An unknown level name fails before any handler is attached."""
    monkeypatch.setenv(config.LOG_LEVEL_ENV, "loud")
    with pytest.raises(config.InvalidConfigError):
        gfn_logging.configure_logging()
    assert not any(isinstance(h, RichHandler) for h in gfn_logger.handlers)
