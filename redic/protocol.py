"""Length-prefixed framing and non-blocking connection handling."""

from __future__ import annotations

import socket
import struct

MAX_MESSAGE_SIZE = 1 << 20
MESSAGE_SIZE_BYTES = 4
READ_CHUNK = 64 * 1024

_HEADER = struct.Struct("<I")


class ProtocolError(Exception):
    """A connection failed or sent something that cannot be handled."""


class MessageTooLong(ProtocolError):
    """A frame announced a body longer than ``MAX_MESSAGE_SIZE``."""


def encode_frame(payload: bytes) -> bytes:
    """Prefix ``payload`` with its four-byte little-endian length."""
    if len(payload) > MAX_MESSAGE_SIZE:
        raise MessageTooLong(f"message of {len(payload)} bytes is too long")
    return _HEADER.pack(len(payload)) + bytes(payload)


def configure_socket(sock: socket.socket) -> None:
    """Enable address reuse and switch the socket to non-blocking mode."""
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    sock.setblocking(False)


def create_listener(host: str = "0.0.0.0", port: int = 1234) -> socket.socket:
    """Open a configured, bound and listening TCP socket."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        configure_socket(sock)
        sock.bind((host, port))
        sock.listen(socket.SOMAXCONN)
    except OSError:
        sock.close()
        raise
    return sock


def accept_connection(listener: socket.socket) -> Connection:
    """Accept one client from ``listener`` as a non-blocking connection."""
    sock, _addr = listener.accept()
    try:
        sock.setblocking(False)
    except OSError:
        sock.close()
        raise
    return Connection(sock)


class Connection:
    """One client socket with its incoming and outgoing buffers."""

    def __init__(self, sock: socket.socket) -> None:
        self.sock = sock
        self.want_read = True
        self.want_write = False
        self.want_close = False
        self.incoming = bytearray()
        self.outgoing = bytearray()

    def __enter__(self) -> Connection:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def fileno(self) -> int:
        return self.sock.fileno()

    def try_one_request(self) -> bytes | None:
        """Echo one complete frame from the incoming buffer, if there is one.

        Returns the frame's body, or None when more data is needed.
        """
        if len(self.incoming) < MESSAGE_SIZE_BYTES:
            return None
        (length,) = _HEADER.unpack_from(self.incoming)
        if length > MAX_MESSAGE_SIZE:
            self.want_close = True
            raise MessageTooLong(f"announced message of {length} bytes is too long")
        end = MESSAGE_SIZE_BYTES + length
        if end > len(self.incoming):
            return None
        request = bytes(self.incoming[MESSAGE_SIZE_BYTES:end])
        self.outgoing += self.incoming[:end]
        del self.incoming[:end]
        return request

    def receive(self, data: bytes) -> list[bytes]:
        """Buffer ``data`` and process every complete frame it finishes."""
        self.incoming += data
        requests = []
        try:
            while (request := self.try_one_request()) is not None:
                requests.append(request)
        except MessageTooLong:
            pass
        if self.outgoing:
            self.want_read = False
            self.want_write = True
        return requests

    def handle_read(self) -> list[bytes]:
        """Read what the socket has, process it and try to reply at once."""
        try:
            data = self.sock.recv(READ_CHUNK)
        except BlockingIOError:
            return []
        except OSError as exc:
            self.want_close = True
            raise ProtocolError(f"read failed: {exc}") from exc
        if not data:
            self.want_close = True
            return []
        requests = self.receive(data)
        self.handle_write()
        return requests

    def handle_write(self) -> int:
        """Send as much of the outgoing buffer as the socket accepts."""
        if not self.outgoing:
            return 0
        try:
            sent = self.sock.send(self.outgoing)
        except BlockingIOError:
            return 0
        except OSError as exc:
            self.want_close = True
            raise ProtocolError(f"write failed: {exc}") from exc
        del self.outgoing[:sent]
        if not self.outgoing:
            self.want_read = True
            self.want_write = False
        return sent

    def close(self) -> None:
        self.sock.close()