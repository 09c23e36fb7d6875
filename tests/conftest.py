import io

import pytest

import termio.io
from termio import CliIO


@pytest.fixture
def capable(monkeypatch):
    """Make every stream look like an interactive terminal."""
    monkeypatch.setattr(termio.io, "detect_capability", lambda stream: True)


@pytest.fixture
def make_cliio():
    """Create a CliIO on in-memory streams."""

    def make(input=b""):
        return CliIO(io.BytesIO(input), io.BytesIO(), io.BytesIO())

    return make
