# iosched

Small building blocks for working with POSIX sockets from Python: an owning,
thread-safe handle for a socket descriptor, and a message header that
gathers the buffers of one scatter/gather message.

## Installation

```
pip install iosched
```

## Socket handles

`iosched.socket_handle.SocketHandle` owns a native socket descriptor. It
closes the descriptor when `close()` is called, when a `with` block ends,
or when the handle is garbage-collected.

```python
import socket
from iosched.socket_handle import SocketHandle, is_valid_socket, swap

with SocketHandle.create(socket.AF_INET, socket.SOCK_STREAM, socket.IPPROTO_TCP) as handle:
    assert handle                      # holds a valid descriptor
    fd = handle.fileno()
    assert is_valid_socket(fd)
    handle.set_error(0)
    print(handle.get_error())          # 0
```

- `SocketHandle(handle)` adopts an existing descriptor. If the descriptor
  is not an open socket, `OSError` is raised. With no argument, or with
  `-1` (`INVALID_SOCKET`), the handle is empty and evaluates false.
- `SocketHandle.create(domain, type, protocol)` opens a new socket and
  returns a handle owning it; it raises `OSError` if that fails, including
  for negative arguments.
- `fileno()` and `int(handle)` return the descriptor, or `-1` when empty.
- `detach()` gives up ownership and returns the descriptor without closing it.
- `close()` closes the descriptor if there is one and never raises.
- `set_error(code)` / `get_error()` store and return an integer system
  error code for the socket; it starts at `0`.
- Handles compare, order and hash by their descriptor, and compare equal
  to (and order against) a plain integer descriptor. An empty handle
  therefore orders before any valid one.
- `swap(lhs, rhs)` exchanges the descriptors and stored error codes of two
  handles. Swapping a handle with itself does nothing; concurrent swaps
  from several threads are safe.
- `is_valid_socket(fd)` tells whether an integer descriptor is an open socket.

## Message headers

`iosched.socket_message.MessageHeader` is a dataclass holding the address
buffer (`msg_name`), a list of data buffers (`msg_iov`), ancillary control
data (`msg_control`) and `flags`. The buffers default to empty
`bytearray`s and an empty list.

`MessageHeader.native()` returns a frozen `NativeMessage` with `name`,
`namelen`, `iov`, `iovlen`, `control`, `controllen` and `flags`. The
`name`, `iov` and `control` fields are `memoryview`s that share memory with
the header's buffers; the length fields give their sizes in bytes (and the
number of data buffers for `iovlen`).

```python
from iosched.socket_message import MessageHeader

data = bytearray(b"Hello, world!")
header = MessageHeader(msg_iov=[data])
view = header.native()
assert view.iovlen == 1 and view.iov[0].nbytes == 13
```

## What this package does not do

It has no event loop, poll multiplexer or asynchronous operations, and it
does not wrap the socket calls themselves (bind, listen, accept, connect,
sendmsg, recvmsg, socket options). Use Python's `socket` module for those,
passing it `handle.fileno()` and the views from `MessageHeader.native()`.

## Running the tests

```
pip install -e .[test]
pytest
```