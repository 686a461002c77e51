import select
import socket

import pytest

from redic.protocol import MAX_MESSAGE_SIZE, create_listener, encode_frame
from redic.server import Server, main


@pytest.fixture
def server():
    srv = Server(create_listener("127.0.0.1", 0))
    yield srv
    srv.close()


def _connect(server):
    client = socket.create_connection(server.listener.getsockname(), timeout=2.0)
    for _ in range(50):
        server.poll_once(0.05)
        if server.connections:
            break
    return client


def _pump(server, client, expected):
    received = b""
    for _ in range(100):
        server.poll_once(0.05)
        ready, _, _ = select.select([client], [], [], 0)
        if ready:
            chunk = client.recv(65536)
            if not chunk:
                break
            received += chunk
        if len(received) >= expected:
            break
    return received


def test_accepts_connection(server):
    client = _connect(server)
    try:
        assert len(server.connections) == 1
    finally:
        client.close()


def test_echoes_frame(server):
    client = _connect(server)
    try:
        frame = encode_frame(b"hello")
        client.sendall(frame)
        assert _pump(server, client, len(frame)) == frame
    finally:
        client.close()


def test_echoes_several_frames_in_order(server):
    client = _connect(server)
    try:
        data = encode_frame(b"first") + encode_frame(b"second")
        client.sendall(data)
        assert _pump(server, client, len(data)) == data
    finally:
        client.close()


def test_drops_connection_when_client_closes(server):
    client = _connect(server)
    client.close()
    for _ in range(50):
        server.poll_once(0.05)
        if not server.connections:
            break
    assert server.connections == {}


def test_drops_connection_on_oversized_frame(server):
    client = _connect(server)
    try:
        client.sendall((MAX_MESSAGE_SIZE + 1).to_bytes(4, "little"))
        for _ in range(50):
            server.poll_once(0.05)
            if not server.connections:
                break
        assert server.connections == {}
    finally:
        client.close()


def test_poll_once_times_out_without_events(server):
    assert server.poll_once(0.01) == 0


def test_main_rejects_bad_port():
    with pytest.raises(SystemExit):
        main(["--port", "notanumber"])