"""
The CliIO class: reading and writing a terminal via three channels.

Styled writes and control sequences are only emitted when the output
channel is an interactive terminal. Otherwise styling is dropped and
control operations are no-ops, so redirected output stays clean.
"""

import io
import atexit
import logging

from .term.capability import detect_capability
from .term.streams import as_channel, default_streams, is_cli
from .term.styles import resolve
from .term import sequences
from .log import Logger, LogLevel


logger = logging.getLogger("termio")


class CliIO:
    """Terminal I/O over an input, output and errors stream.

    Streams that are not given default to the process' standard streams.
    Methods that write return self, so calls can be chained:

        io.cursor_up().erase().write("done", "green")
    """

    def __init__(self, input=None, output=None, errors=None, encoding=None):
        self._encoding = encoding
        self._cursor_hidden = False
        self._exit_hook_registered = False
        self._logger = Logger(self)

        if input is None or output is None or errors is None:
            default_in, default_out, default_err = default_streams()
            input = default_in if input is None else input
            output = default_out if output is None else output
            errors = default_err if errors is None else errors

        self.set_input_stream(input)
        self.set_output_stream(output)
        self.set_errors_stream(errors)

    def __repr__(self):
        return f"<CliIO output_capable={self._output_capable} at 0x{id(self):x}>"

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self._restore_cursor()
        self._unregister_exit_hook()

    # %% Channels

    def set_input_stream(self, stream):
        """Set the stream to read from."""
        self._input = as_channel(stream, "r", self._encoding)
        return self

    def set_output_stream(self, stream):
        """Set the stream to write to. This re-detects terminal capability."""
        self._output = as_channel(stream, "w", self._encoding)
        self._output_capable = detect_capability(stream)
        return self

    def set_errors_stream(self, stream):
        """Set the stream to write errors to. This re-detects terminal capability."""
        self._errors = as_channel(stream, "w", self._encoding)
        self._errors_capable = detect_capability(stream)
        return self

    @property
    def output_capable(self):
        """Whether the output stream accepts ANSI escape sequences."""
        return self._output_capable

    @property
    def errors_capable(self):
        """Whether the errors stream accepts ANSI escape sequences."""
        return self._errors_capable

    @staticmethod
    def is_cli():
        """Whether we run as a command-line program."""
        return is_cli()

    # %% Reading and writing

    def _write_raw(self, channel, text):
        # Text written via the wrapper (e.g. print) must go out first
        if channel.stream is not channel.buffer:
            channel.stream.flush()
        channel.buffer.write(text.encode(channel.encoding))
        channel.buffer.flush()

    def write(self, text, style=None):
        """Write text to the output stream, styled if the terminal supports it.

        The style is a string "fg|bg|attr" or a StyleDescriptor.
        """
        if self._output_capable:
            text = resolve(text, style)
        self._write_raw(self._output, text)
        return self

    def write_line(self, text, style=None):
        """Write text followed by a newline. The newline is not styled."""
        self.write(text, style)
        self._write_raw(self._output, sequences.NEWLINE)
        return self

    def write_error(self, text, style=None):
        """Write text to the errors stream, styled if that terminal supports it."""
        if self._errors_capable:
            text = resolve(text, style)
        self._write_raw(self._errors, text)
        return self

    def write_error_line(self, text, style=None):
        """Write text followed by a newline to the errors stream."""
        self.write_error(text, style)
        self._write_raw(self._errors, sequences.NEWLINE)
        return self

    def read(self):
        """Read a line from the input stream, without the trailing newline.

        Blocks until a line is available. At the end of the stream, returns
        what was read so far (possibly an empty string).
        """
        if isinstance(self._input.stream, io.TextIOBase):
            # Read via the wrapper, it may hold input that was already buffered
            line = self._input.stream.readline()
        else:
            line = self._input.buffer.readline()
        if isinstance(line, bytes):
            line = line.decode(self._input.encoding)
        return line.rstrip(sequences.NEWLINE)

    def prompt(self, text, style=None):
        """Write the text and read the response."""
        self.write(text, style)
        return self.read()

    def log(self, message, level=LogLevel.DEFAULT):
        """Write a timestamped message, styled according to the level."""
        return self._logger.log(message, level)

    # %% Control sequences

    def _control(self, sequence):
        if self._output_capable:
            self._write_raw(self._output, sequence)
        return self

    def cursor_up(self, rows=1):
        """Move the cursor up by the given number of rows."""
        return self._control(sequences.cursor_up(rows))

    def cursor_down(self, rows=1):
        """Move the cursor down by the given number of rows."""
        return self._control(sequences.cursor_down(rows))

    def cursor_forward(self, columns=1):
        """Move the cursor forward by the given number of columns."""
        return self._control(sequences.cursor_forward(columns))

    def cursor_backward(self, columns=1):
        """Move the cursor backward by the given number of columns."""
        return self._control(sequences.cursor_backward(columns))

    def erase(self):
        """Erase the current line."""
        return self._control(sequences.ERASE_LINE)

    def erase_to_start(self):
        """Erase the current line from the start up to the cursor."""
        return self._control(sequences.ERASE_TO_START)

    def erase_to_end(self):
        """Erase the current line from the cursor to the end."""
        return self._control(sequences.ERASE_TO_END)

    def tab(self):
        return self._control(sequences.TAB)

    def carriage_return(self):
        return self._control(sequences.CARRIAGE_RETURN)

    def new_line(self):
        return self._control(sequences.NEWLINE)

    def backspace(self, columns=1):
        return self._control(sequences.backspace(columns))

    # %% Cursor visibility

    def hide_cursor(self):
        """Hide the cursor.

        The cursor is shown again when the context is exited, or when the
        interpreter exits. The latter does not happen when the process is
        killed by a signal that bypasses the atexit hooks.
        """
        if not self._output_capable:
            return self
        if not self._exit_hook_registered:
            atexit.register(self._restore_cursor)
            self._exit_hook_registered = True
            logger.info("registered exit hook to restore the cursor")
        self._cursor_hidden = True
        return self._control(sequences.HIDE_CURSOR)

    def show_cursor(self):
        """Show the cursor."""
        self._cursor_hidden = False
        self._unregister_exit_hook()
        return self._control(sequences.SHOW_CURSOR)

    def _unregister_exit_hook(self):
        if self._exit_hook_registered:
            atexit.unregister(self._restore_cursor)
            self._exit_hook_registered = False

    def _restore_cursor(self):
        # At exit, the stream may already have been closed by its owner
        if self._cursor_hidden and not getattr(self._output.buffer, "closed", False):
            self.show_cursor()
