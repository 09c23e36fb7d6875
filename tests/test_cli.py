import socket
import logging

import termio
from termio._cli import cli, demo, probe
from termio.utils import UDPHandler, enable_udp_logging, get_log_port


def test_version(capsys):
    assert cli(["termio", "--version"]) == 0
    assert capsys.readouterr().out.strip() == f"termio {termio.__version__}"


def test_probe_redirected(capfd):
    assert cli(["termio", "--probe"]) == 0
    out = capfd.readouterr().out
    assert "stdout: False" in out
    assert "\x1b[" not in out


def test_demo_plain(make_cliio):
    cliio = make_cliio()
    demo(cliio)
    out = cliio._output.buffer.getvalue().decode()
    assert "light_magenta" in out
    assert "underline" in out
    assert "a warning" in out
    assert "\x1b[" not in out


def test_probe_reports_capability(capable, make_cliio):
    cliio = make_cliio()
    probe(cliio)
    out = cliio._output.buffer.getvalue().decode()
    assert "stdout: True" in out


def test_log_port(monkeypatch):
    monkeypatch.delenv("TERMIO_LOG_PORT", raising=False)
    assert get_log_port() == 12013
    monkeypatch.setenv("TERMIO_LOG_PORT", "4321")
    assert get_log_port() == 4321


def test_enable_udp_logging():
    receiver = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    receiver.bind(("127.0.0.1", 0))
    receiver.settimeout(5)
    port = receiver.getsockname()[1]

    logger = logging.getLogger("termio")
    handler = enable_udp_logging(port=port)
    try:
        assert isinstance(handler, UDPHandler)
        assert enable_udp_logging() is handler
        logger.debug("x" * 1500)  # sent in chunks of 1 KiB
        chunks = [receiver.recvfrom(2**16)[0] for _ in range(2)]
    finally:
        logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
        handler.close()
        receiver.close()

    assert [len(chunk) for chunk in chunks] == [1024, 476]
