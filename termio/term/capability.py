"""
Detect whether a stream accepts ANSI escape sequences.

We only emit escape codes to an interactive terminal on a POSIX-ish
platform. On Windows we don't try to enable virtual terminal processing
via the console API; we simply write plain text. Anything we cannot
probe (in-memory buffers, closed files, objects without a fileno) is
treated as a dumb stream.
"""

import os
import sys
import logging
from typing import NamedTuple, Optional


logger = logging.getLogger("termio")


class UnsupportedProbe(OSError):
    """The platform provides no way to ask whether an fd is a tty."""


class ProbeResult(NamedTuple):
    isatty: bool
    error: Optional[Exception] = None

    @property
    def ok(self):
        return self.error is None


def is_windows(platform=None, environ=None) -> bool:
    """Whether we run on a Windows-family OS."""
    platform = sys.platform if platform is None else platform
    environ = os.environ if environ is None else environ
    if platform.lower().startswith("win"):
        return True
    return environ.get("OS", "").lower().startswith("windows")


def probe_tty(stream) -> ProbeResult:
    """Ask the OS whether the given stream is connected to a terminal.

    Errors are returned as part of the result, never raised.
    """
    isatty = getattr(os, "isatty", None)
    if isatty is None:
        return ProbeResult(False, UnsupportedProbe("os.isatty is not available"))
    try:
        fd = stream.fileno()
        return ProbeResult(bool(isatty(fd)))
    except (OSError, ValueError, AttributeError, TypeError) as err:
        # io.UnsupportedOperation is both an OSError and a ValueError
        return ProbeResult(False, err)


def detect_capability(stream, platform=None, environ=None) -> bool:
    """Whether ANSI control sequences can be written to the given stream."""
    if is_windows(platform, environ):
        logger.debug("no ansi support: windows platform")
        return False
    result = probe_tty(stream)
    if not result.ok:
        logger.debug(f"no ansi support for {stream!r}: {result.error!r}")
        return False
    logger.debug(f"ansi support for {stream!r}: {result.isatty}")
    return result.isatty
