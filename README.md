# redic

redic is a small single-threaded TCP server. It uses non-blocking sockets
and the standard library's `selectors` module. Each message on the wire is a
4-byte little-endian length followed by that many bytes of payload. The
server sends every complete message it receives back to the sender, with the
same framing.

If a message declares a length over 1 MiB (`1 << 20` bytes), the server
closes the connection.

## Installing

```
pip install .
```

## Running the server

```
redic-server
```

By default the server listens on all interfaces (`0.0.0.0`) on port 1234. It
runs until it is interrupted. Two options change where it listens:

```
redic-server --host 127.0.0.1 --port 4000
```

If the listening socket cannot be set up, the command prints the error and
exits with status 1.

## Using it from Python

```python
import socket

from redic.protocol import encode_frame

with socket.create_connection(("127.0.0.1", 1234)) as sock:
    sock.sendall(encode_frame(b"hello"))
    reply = sock.recv(1024)
    assert reply == encode_frame(b"hello")
```

You can also run the server inside your own program and drive the event
loop yourself:

```python
from redic.protocol import create_listener
from redic.server import Server

with Server(create_listener("127.0.0.1", 0)) as server:
    while True:
        server.poll_once(0.1)
```

`Server.poll_once(timeout)` waits once for activity, handles it, and returns
the number of ready events. `Server.serve_forever()` runs the same loop with
no timeout. `Server.close()` closes every connection and the listener.

### Pieces

- `redic.protocol.encode_frame(payload)` adds the length prefix to a payload.
  It raises `MessageTooLong` if the payload is over the limit.
- `redic.protocol.create_listener(host, port)` opens a non-blocking listening
  socket with `SO_REUSEADDR` set. `accept_connection(listener)` accepts one
  client and returns it as a `Connection`.
- `redic.protocol.Connection` holds one client socket with its `incoming`
  and `outgoing` buffers. It also has the `want_read`, `want_write` and
  `want_close` flags.
  - `receive(data)` buffers bytes and returns the bodies of the frames that
    are now complete.
  - `try_one_request()` moves one complete frame from the incoming buffer to
    the outgoing buffer and returns its body. It returns `None` when more
    data is needed.
  - `handle_read()` and `handle_write()` do the socket I/O.
- `redic.protocol.MessageTooLong`, a subclass of `ProtocolError`, is raised
  when a frame declares a length over the limit.
- `redic.vector.Vector` is a growable sequence. Its `capacity` grows in steps
  of four. It supports `append`, `extend`, `resize`, `erase(start, count)`
  and `clear`.

## What it does not do

The server does not parse commands or store any data. It only sends back each
message it receives. It has no key-value storage, no persistence and no
configuration file.

## Tests

```
pip install .[test]
pytest
```