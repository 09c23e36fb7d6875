"""
Turn style descriptors into SGR escape sequences.

A descriptor names a foreground color, a background color and a text
attribute, written as "fg|bg|attr". Each part is optional, so "red",
"red|white" and "none|none|bold" are all fine. Unknown names are
ignored rather than reported, so a typo never breaks a CLI session.
"""

from types import MappingProxyType
from typing import NamedTuple, Optional


CSI = "\x1b["
RESET = CSI + "0m"

FOREGROUNDS = MappingProxyType(
    {
        "none": None,
        "black": 30,
        "red": 31,
        "green": 32,
        "yellow": 33,
        "blue": 34,
        "purple": 35,
        "cyan": 36,
        "light_gray": 37,
        "dark_gray": 90,
        "light_red": 91,
        "light_green": 92,
        "light_yellow": 93,
        "light_blue": 94,
        "light_magenta": 95,
        "light_cyan": 96,
        "white": 97,
    }
)

# Background codes are the foreground codes shifted by 10
BACKGROUNDS = MappingProxyType(
    {name: None if code is None else code + 10 for name, code in FOREGROUNDS.items()}
)

ATTRIBUTES = MappingProxyType(
    {
        "none": None,
        "bold": 1,
        "faint": 2,
        "italic": 3,
        "underline": 4,
        "blink": 5,
        "negative": 7,
    }
)


class StyleDescriptor(NamedTuple):
    """A (foreground, background, attribute) triple of names."""

    foreground: Optional[str] = None
    background: Optional[str] = None
    attribute: Optional[str] = None

    @classmethod
    def parse(cls, text):
        """Parse "fg|bg|attr". Missing parts default to None, extra parts are ignored."""
        parts = [part.strip() or None for part in text.split("|")[:3]]
        return cls(*parts)

    def __str__(self):
        return "|".join(str(part) if part else "none" for part in self)


def as_descriptor(style):
    """Get a StyleDescriptor from a string or descriptor, or None for no styling."""
    if not style:
        return None
    elif isinstance(style, StyleDescriptor):
        return style
    elif isinstance(style, str):
        return StyleDescriptor.parse(style)
    else:
        raise TypeError(f"Expected a style string or StyleDescriptor, got {style!r}")


def _lookup(table, name):
    # Anything that is not a known name has no code
    return table.get(name) if isinstance(name, str) else None


def sgr_codes(style):
    """Get the list of SGR parameters: background, attribute, foreground."""
    descriptor = as_descriptor(style)
    if descriptor is None:
        return []
    codes = [
        _lookup(BACKGROUNDS, descriptor.background),
        _lookup(ATTRIBUTES, descriptor.attribute),
        _lookup(FOREGROUNDS, descriptor.foreground),
    ]
    return [code for code in codes if code is not None]


def resolve(text, style=None):
    """Wrap text in the escape sequences for the given style.

    Returns the text unchanged if no style is given. Note that a style
    that resolves to no codes at all still produces "\\x1b[m" (which
    terminals read as a reset).
    """
    if as_descriptor(style) is None:
        return text
    params = ";".join(str(code) for code in sgr_codes(style))
    return f"{CSI}{params}m{text}{RESET}"
