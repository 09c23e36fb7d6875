"""
Timestamped log lines on a CliIO.

Each line looks like "19.10.2026 14:03:59.042: message", with the
timestamp in dark gray and the message styled by its level.
"""

import enum
import time
import logging
import datetime
from types import MappingProxyType


class LogLevel(enum.IntEnum):
    DEFAULT = 0
    WARN = 1
    ERROR = 2


LEVEL_STYLES = MappingProxyType(
    {
        LogLevel.DEFAULT: None,
        LogLevel.WARN: "yellow",
        LogLevel.ERROR: "white|red|bold",
    }
)

TIMESTAMP_STYLE = "dark_gray"


def format_timestamp(when=None):
    """Format a time.time() value as DD.MM.YYYY HH:MM:SS.mmm (local time)."""
    when = time.time() if when is None else when
    dt = datetime.datetime.fromtimestamp(when)
    return dt.strftime("%d.%m.%Y %H:%M:%S") + f".{dt.microsecond // 1000:03d}"


class Logger:
    """Writes log lines to the output stream of a CliIO."""

    def __init__(self, cliio):
        self._cliio = cliio

    def log(self, message, level=LogLevel.DEFAULT):
        style = LEVEL_STYLES.get(level)
        return (
            self._cliio.write(format_timestamp(), TIMESTAMP_STYLE)
            .write(": ")
            .write(message, style)
            .write("\n")
        )


class CliIOHandler(logging.Handler):
    """A logging handler that writes records as CliIO log lines.

    Warnings are shown in yellow, errors and critical messages in white on red.
    """

    def __init__(self, cliio, level=logging.NOTSET):
        super().__init__(level)
        self.cliio = cliio

    @staticmethod
    def level_for(levelno):
        if levelno >= logging.ERROR:
            return LogLevel.ERROR
        elif levelno >= logging.WARNING:
            return LogLevel.WARN
        return LogLevel.DEFAULT

    def emit(self, record):
        try:
            self.cliio.log(self.format(record), self.level_for(record.levelno))
        except Exception:
            self.handleError(record)
