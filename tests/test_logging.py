"""Tests for stderr logging setup."""

import io
import logging

import pytest

from osint_mcp.logging_setup import ColorFormatter, PlainFormatter, configure_logging


@pytest.fixture
def restore_root():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_plain_output_for_non_tty(restore_root):
    stream = io.StringIO()
    handler = configure_logging("debug", stream=stream)
    assert isinstance(handler.formatter, PlainFormatter)
    assert restore_root.level == logging.DEBUG

    logging.getLogger("osint_mcp.client").debug("hello")
    out = stream.getvalue()
    assert "DEBUG" in out
    assert "hello" in out
    assert "\033[" not in out


def test_color_output_for_tty(restore_root):
    class _Tty(io.StringIO):
        def isatty(self):
            return True

    handler = configure_logging("INFO", stream=_Tty())
    assert isinstance(handler.formatter, ColorFormatter)


def test_unknown_level_falls_back_to_info(restore_root):
    configure_logging("chatty", stream=io.StringIO())
    assert restore_root.level == logging.INFO


def test_reconfigure_replaces_handler(restore_root):
    configure_logging("INFO", stream=io.StringIO())
    configure_logging("INFO", stream=io.StringIO())
    ours = [h for h in restore_root.handlers if h.get_name() == "osint_mcp"]
    assert len(ours) == 1


def test_http_loggers_quieted(restore_root):
    configure_logging("DEBUG", stream=io.StringIO())
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING


def test_color_formatter_includes_level_and_name():
    record = logging.LogRecord("osint_mcp.server", logging.WARNING, __file__, 1, "careful", None, None)
    text = ColorFormatter().format(record)
    assert "WARNING" in text
    assert "server" in text
    assert "careful" in text
