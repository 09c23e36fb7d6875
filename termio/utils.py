import os
import socket
import logging

logger = logging.getLogger("termio")

DEFAULT_PORT = 12013


def get_log_port():
    """Get the port for diagnostic logs, from TERMIO_LOG_PORT or the default."""
    value = os.environ.get("TERMIO_LOG_PORT", "").strip()
    return int(value) if value else DEFAULT_PORT


class UDPHandler(logging.Handler):
    """Send log records to a local UDP port, in chunks of 1 KiB."""

    def __init__(self, port=None):
        super().__init__()
        self.udp_address = ("127.0.0.1", get_log_port() if port is None else port)
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)

    def close(self):
        self._socket.close()
        super().close()

    def emit(self, record):
        try:
            bb = self.format(record).encode()
            size = 2**10
            while bb:
                bb1 = bb[:size]
                bb = bb[size:]
                self._socket.sendto(bb1, self.udp_address)
        except Exception:
            self.handleError(record)


def enable_udp_logging(port=None, level=logging.DEBUG):
    """Send the diagnostic logs of termio to a UDP port.

    Writing these to the terminal would mix them with the output that is
    being diagnosed. Use ``termio --listen`` in another terminal to see them.
    """
    for handler in logger.handlers:
        if isinstance(handler, UDPHandler):
            return handler
    handler = UDPHandler(port)
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


def listen_to_logs(port=None, file=None):
    """Called from ``termio --listen``.

    This way we can see the logs from another process.
    """
    port = get_log_port() if port is None else port
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", port))

    try:
        while True:
            data, addr = sock.recvfrom(2**20)
            print(data.decode(), file=file, flush=True)
    finally:
        sock.close()
