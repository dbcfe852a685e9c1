# src/pocket_relpath/utils_logs.py
"""Package logger.

Adds a TRACE level below DEBUG, tags non-info lines (colored when the
runtime allows it), and sends WARNING and above to stderr.
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, TextIO, cast

from .constants import LEVEL_ORDER
from .meta import PROGRAM_PACKAGE
from .runtime import current_runtime

# --- ANSI Colors -------------------------------------------------------------

RESET = "\033[0m"
GRAY = "\033[90m"
CYAN = "\033[36m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"

# --- Levels ------------------------------------------------------------------

TRACE_LEVEL = logging.DEBUG - 5
SILENT_LEVEL = logging.CRITICAL + 1
logging.addLevelName(TRACE_LEVEL, "TRACE")

# name → (logging level, tag color, tag)
_LEVELS: dict[str, tuple[int, str, str]] = {
    "trace": (TRACE_LEVEL, GRAY, "[TRACE]"),
    "debug": (logging.DEBUG, CYAN, "[DEBUG]"),
    "info": (logging.INFO, "", ""),
    "warning": (logging.WARNING, YELLOW, "⚠️ "),
    "error": (logging.ERROR, RED, "❌ "),
    "critical": (logging.CRITICAL, RED, "💥 "),
    "silent": (SILENT_LEVEL, "", ""),
}
assert list(_LEVELS) == LEVEL_ORDER, "level table out of sync"  # noqa: S101


def level_to_number(level_name: str) -> int:
    """Map a level name (any case) to its logging number, INFO if unknown."""
    entry = _LEVELS.get(level_name.lower())
    return entry[0] if entry else logging.INFO


def colorize(text: str, color: str, *, use_color: bool | None = None) -> str:
    if use_color is None:
        use_color = current_runtime["use_color"]
    return f"{color}{text}{RESET}" if use_color and color else text


# --- Logger pieces -----------------------------------------------------------


class LoggerWithTrace(logging.Logger):
    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, **kwargs)


class TagFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        msg = super().format(record)
        _, color, tag = _LEVELS.get(record.levelname.lower(), (0, "", ""))
        return f"{colorize(tag, color)} {msg}" if tag else msg


class DualStreamHandler(logging.StreamHandler[TextIO]):
    """Send WARNING and above to stderr, everything else to stdout."""

    def emit(self, record: logging.LogRecord) -> None:
        # looked up per record so redirected sys streams are honored
        self.stream = sys.stderr if record.levelno >= logging.WARNING else sys.stdout
        super().emit(record)


def _build_logger() -> LoggerWithTrace:
    # only our logger gets the TRACE-capable class
    previous = logging.getLoggerClass()
    logging.setLoggerClass(LoggerWithTrace)
    try:
        logger = cast("LoggerWithTrace", logging.getLogger(PROGRAM_PACKAGE))
    finally:
        logging.setLoggerClass(previous)

    if not logger.handlers:
        handler = DualStreamHandler(sys.stdout)
        handler.setFormatter(TagFormatter("%(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
    return logger


_logger = _build_logger()


# --- Public helpers ----------------------------------------------------------


def get_logger() -> LoggerWithTrace:
    """Return the package logger, synced to the runtime log level."""
    _logger.setLevel(level_to_number(str(current_runtime.get("log_level", "info"))))
    return _logger


def set_log_level(level: str) -> None:
    current_runtime["log_level"] = level
    get_logger()


@contextmanager
def temporary_log_level(level: str) -> Iterator[None]:
    prev = current_runtime["log_level"]
    set_log_level(level)
    try:
        yield
    finally:
        set_log_level(prev)
