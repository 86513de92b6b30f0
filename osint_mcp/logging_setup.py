"""Colored stderr logging.

stdout carries the MCP JSON-RPC stream, so every log line goes to stderr.
"""

from __future__ import annotations

import logging
import sys

# Chatty per-request loggers from the HTTP stack.
_QUIET_LOGGERS = ("httpx", "httpcore")


class ColorFormatter(logging.Formatter):
    """ANSI-colored log formatter for terminal output."""

    _COLORS = {
        logging.DEBUG:    "\033[36m",     # cyan
        logging.INFO:     "\033[32m",     # green
        logging.WARNING:  "\033[33m",     # yellow
        logging.ERROR:    "\033[31m",     # red
        logging.CRITICAL: "\033[1;31m",   # bold red
    }
    _RESET = "\033[0m"
    _DIM = "\033[2m"

    def format(self, record: logging.LogRecord) -> str:
        color = self._COLORS.get(record.levelno, "")
        ts = self.formatTime(record, "%H:%M:%S")
        name = record.name.split(".")[-1][:20]
        msg = record.getMessage()
        if record.exc_info:
            msg = f"{msg}\n{self.formatException(record.exc_info)}"
        return (
            f"{self._DIM}{ts}{self._RESET} "
            f"{color}{record.levelname:<8s}{self._RESET} "
            f"{self._DIM}[{name:>20s}]{self._RESET} "
            f"{color}{msg}{self._RESET}"
        )


class PlainFormatter(logging.Formatter):
    """Plain-text formatter for non-terminal stderr (no ANSI codes)."""

    def format(self, record: logging.LogRecord) -> str:
        ts = self.formatTime(record, "%Y-%m-%d %H:%M:%S")
        name = record.name.split(".")[-1][:20]
        msg = record.getMessage()
        if record.exc_info:
            msg = f"{msg}\n{self.formatException(record.exc_info)}"
        return f"{ts} {record.levelname:<8s} [{name:>20s}] {msg}"


def configure_logging(level: str = "INFO", stream=None) -> logging.Handler:
    """Install a single stderr handler on the root logger and return it.

    Colors are used only when the stream is a TTY.  Unknown level names
    fall back to INFO.  Calling this again replaces the previous handler.
    """
    stream = stream if stream is not None else sys.stderr
    log_level = getattr(logging, str(level).upper(), logging.INFO)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    handler = logging.StreamHandler(stream)
    is_tty = getattr(stream, "isatty", lambda: False)()
    handler.setFormatter(ColorFormatter() if is_tty else PlainFormatter())
    handler.set_name("osint_mcp")

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == "osint_mcp":
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(log_level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    return handler
