"""
Cursor movement, erase and whitespace control sequences.

These only build strings. Whether they get written is up to the caller,
which should check that the stream is a terminal first.
"""

import os
from types import MappingProxyType


CSI = "\x1b["

ERASE_LINE = CSI + "2K"
ERASE_TO_START = CSI + "1K"
ERASE_TO_END = CSI + "K"

HIDE_CURSOR = CSI + "?25l"
SHOW_CURSOR = CSI + "?25h"

TAB = "\x09"
CARRIAGE_RETURN = "\x0d"
NEWLINE = os.linesep
BACKSPACE = "\x08"


def _check_count(n):
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"Count must be an int, not {n!r}")
    if n < 0:
        raise ValueError(f"Count must be non-negative, not {n}")
    return n


def cursor_up(n=1):
    return f"{CSI}{_check_count(n)}A"


def cursor_down(n=1):
    return f"{CSI}{_check_count(n)}B"


def cursor_forward(n=1):
    return f"{CSI}{_check_count(n)}C"


def cursor_backward(n=1):
    return f"{CSI}{_check_count(n)}D"


def backspace(n=1):
    return BACKSPACE * _check_count(n)


SEQUENCES = MappingProxyType(
    {
        "cursor_up": cursor_up,
        "cursor_down": cursor_down,
        "cursor_forward": cursor_forward,
        "cursor_backward": cursor_backward,
        "erase": lambda: ERASE_LINE,
        "erase_to_start": lambda: ERASE_TO_START,
        "erase_to_end": lambda: ERASE_TO_END,
        "hide_cursor": lambda: HIDE_CURSOR,
        "show_cursor": lambda: SHOW_CURSOR,
        "tab": lambda: TAB,
        "carriage_return": lambda: CARRIAGE_RETURN,
        "new_line": lambda: NEWLINE,
        "backspace": backspace,
    }
)
