"""Event loop that accepts clients and echoes their frames."""

from __future__ import annotations

import argparse
import selectors
import socket
import sys

from redic.protocol import (
    Connection,
    ProtocolError,
    accept_connection,
    create_listener,
)


def _interest(conn: Connection) -> int:
    events = 0
    if conn.want_read:
        events |= selectors.EVENT_READ
    if conn.want_write:
        events |= selectors.EVENT_WRITE
    # Always watch for reads so errors and hang-ups are noticed.
    return events or selectors.EVENT_READ


class Server:
    """Serves every connection accepted on a listening socket."""

    def __init__(self, listener: socket.socket) -> None:
        self.listener = listener
        self.connections: dict[int, Connection] = {}
        self._selector = selectors.DefaultSelector()
        self._selector.register(listener, selectors.EVENT_READ, None)

    def __enter__(self) -> Server:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _refresh_interest(self) -> None:
        for conn in self.connections.values():
            events = _interest(conn)
            if self._selector.get_key(conn.sock).events != events:
                self._selector.modify(conn.sock, events, conn)

    def _accept(self) -> None:
        try:
            conn = accept_connection(self.listener)
        except OSError:
            return
        self.connections[conn.fileno()] = conn
        self._selector.register(conn.sock, _interest(conn), conn)

    def _drop(self, conn: Connection) -> None:
        self.connections.pop(conn.fileno(), None)
        self._selector.unregister(conn.sock)
        conn.close()

    def poll_once(self, timeout: float | None = None) -> int:
        """Wait for activity once and handle it; return the number of events."""
        self._refresh_interest()
        ready = self._selector.select(timeout)

        if any(key.data is None for key, _mask in ready):
            self._accept()

        for key, mask in ready:
            conn = key.data
            if conn is None or self.connections.get(conn.fileno()) is not conn:
                continue
            try:
                if mask & selectors.EVENT_READ:
                    conn.handle_read()
                if mask & selectors.EVENT_WRITE:
                    conn.handle_write()
            except ProtocolError:
                conn.want_close = True
            if conn.want_close:
                self._drop(conn)
        return len(ready)

    def serve_forever(self) -> None:
        """Handle events until interrupted."""
        while True:
            self.poll_once(None)

    def close(self) -> None:
        """Close every connection, the selector and the listener."""
        for conn in list(self.connections.values()):
            self._drop(conn)
        self._selector.close()
        self.listener.close()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="redic", description="Echo frames back to clients.")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=1234, help="port to listen on")
    args = parser.parse_args(argv)

    try:
        listener = create_listener(args.host, args.port)
    except OSError as exc:
        print(f"[{exc.errno}] - error setting up the socket: {exc}", file=sys.stderr)
        return 1

    with Server(listener) as server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())