"""Engine and client loggers, and assertions that report through them."""

from __future__ import annotations

import logging
import sys

CORE_LOGGER_NAME = "HAZEL"
CLIENT_LOGGER_NAME = "APP"

TRACE = 5
LOG_FORMAT = "[%(asctime)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

logging.addLevelName(TRACE, "TRACE")

_LEVEL_COLORS = {
    TRACE: "\x1b[37m",
    logging.DEBUG: "\x1b[36m",
    logging.INFO: "\x1b[32m",
    logging.WARNING: "\x1b[33;1m",
    logging.ERROR: "\x1b[31;1m",
    logging.CRITICAL: "\x1b[1;41m",
}
_RESET = "\x1b[0m"


class HazelAssertionError(AssertionError):
    """Raised when an engine or client assertion fails."""


class _ColorStreamHandler(logging.StreamHandler):
    """Stream handler that colours whole lines by level when writing to a terminal."""

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        isatty = getattr(self.stream, "isatty", None)
        if isatty is not None and isatty():
            color = _LEVEL_COLORS.get(record.levelno, "")
            if color:
                return f"{color}{text}{_RESET}"
        return text


def _configure(logger: logging.Logger) -> None:
    logger.handlers.clear()
    handler = _ColorStreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(TRACE)
    logger.propagate = False


def init() -> None:
    """Set up the engine and client loggers to write every level to stdout."""
    _configure(core_logger())
    _configure(client_logger())


def core_logger() -> logging.Logger:
    """Return the logger used by the engine itself."""
    return logging.getLogger(CORE_LOGGER_NAME)


def client_logger() -> logging.Logger:
    """Return the logger used by applications built on the engine."""
    return logging.getLogger(CLIENT_LOGGER_NAME)


def _check(logger: logging.Logger, condition: object, message: str) -> None:
    if not condition:
        logger.error("Assertion Failed: %s", message)
        raise HazelAssertionError(message)


def core_assert(condition: object, message: str) -> None:
    """Log and raise HazelAssertionError through the engine logger if condition is false."""
    _check(core_logger(), condition, message)


def client_assert(condition: object, message: str) -> None:
    """Log and raise HazelAssertionError through the client logger if condition is false."""
    _check(client_logger(), condition, message)