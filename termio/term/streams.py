"""
Provisioning and validation of the three channels (input, output, errors).

Channels are binary file objects. A text stream that wraps a binary
buffer (like sys.stdout) is accepted too; we then write to its buffer,
using the encoding of the text stream.
"""

import io
import sys
from typing import NamedTuple


class InvalidStreamError(ValueError):
    """Raised when a channel is not a valid, open byte stream."""


class Channel(NamedTuple):
    stream: object  # what the user gave us, used for the tty probe
    buffer: object  # the binary file object we read from / write to
    encoding: str


def is_cli():
    """Whether we run as a command-line program with the standard streams attached.

    This is not the case e.g. under pythonw or in some embedded interpreters.
    """
    return sys.__stdin__ is not None and sys.__stdout__ is not None


def default_streams():
    """Get the default (input, output, errors) streams.

    When running as a command-line program these are the process' standard
    streams, otherwise in-memory placeholders.
    """
    if is_cli():
        stdin, stdout = sys.__stdin__, sys.__stdout__
    else:
        stdin, stdout = io.BytesIO(), io.BytesIO()
    stderr = sys.__stderr__ if sys.__stderr__ is not None else io.BytesIO()
    return stdin, stdout, stderr


def as_channel(stream, mode, encoding=None):
    """Validate a stream and get a Channel for it.

    The mode is "r" for the input channel and "w" for the output channels.
    """
    if stream is None:
        raise InvalidStreamError("Invalid resource: None")
    if getattr(stream, "closed", False):
        raise InvalidStreamError(f"Invalid resource: {stream!r} is closed")

    buffer = stream
    if isinstance(stream, io.TextIOBase):
        buffer = getattr(stream, "buffer", None)
        if buffer is None:
            raise InvalidStreamError(
                f"Invalid resource: text stream {stream!r} has no binary buffer"
            )
        encoding = encoding or stream.encoding

    required = "readline" if mode == "r" else "write"
    if not callable(getattr(buffer, required, None)):
        raise InvalidStreamError(f"Invalid resource: {stream!r} has no {required}()")

    return Channel(stream, buffer, encoding or "utf-8")
