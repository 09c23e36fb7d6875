import os
import sys

from . import __version__
from .io import CliIO
from .log import LogLevel
from .term.styles import FOREGROUNDS, ATTRIBUTES
from .utils import enable_udp_logging, listen_to_logs


def demo(cliio):
    """Show the available colors and attributes, and the log levels."""
    for name in FOREGROUNDS:
        cliio.write(f"{name:<14}", name).write(" ").write_line(" " * 8, f"none|{name}")
    cliio.new_line()
    for name in ATTRIBUTES:
        cliio.write_line(name, f"none|none|{name}")
    cliio.new_line()
    cliio.log("a default message")
    cliio.log("a warning", LogLevel.WARN)
    cliio.log("an error", LogLevel.ERROR)


def probe(cliio):
    """Report whether stdout and stderr accept escape sequences."""
    cliio.write_line(f"cli: {cliio.is_cli()}")
    cliio.write_line(f"stdout: {cliio.output_capable}")
    cliio.write_line(f"stderr: {cliio.errors_capable}")


def cli(argv=None):
    argv = sys.argv if argv is None else argv
    if "--version" in argv or "version" in argv[1:2]:
        print("termio", __version__)
        return 0
    if "--listen" in argv:
        listen_to_logs()
        return 0

    if os.environ.get("TERMIO_LOG_PORT"):
        enable_udp_logging()

    cliio = CliIO()
    if "--probe" in argv:
        probe(cliio)
    else:
        demo(cliio)
    return 0
