"""
termio - terminal I/O with ANSI styling that degrades gracefully.
"""

__version__ = "0.1.0"
version_info = tuple(map(int, __version__.split(".")))

from .io import CliIO  # noqa
from .log import LogLevel, CliIOHandler, format_timestamp  # noqa
from .term import StyleDescriptor, InvalidStreamError  # noqa
from ._cli import cli  # noqa
