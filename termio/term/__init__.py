"""
Low-level terminal utilities: capability detection, styles, control
sequences and stream handling.

We target the subset of vt100 that xterm-like terminals support, and only
emit it on POSIX terminals. On Windows, and for anything that is not a
terminal (files, pipes, in-memory buffers), output is plain text.
"""

from .capability import detect_capability, is_windows, probe_tty, ProbeResult  # noqa
from .styles import StyleDescriptor, resolve, sgr_codes  # noqa
from .streams import InvalidStreamError, default_streams, is_cli  # noqa
from . import sequences  # noqa
