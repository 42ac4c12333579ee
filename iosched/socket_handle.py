"""Thread-safe owning wrapper around a native socket descriptor."""

from __future__ import annotations

import errno
import socket as _socket
import threading
from functools import total_ordering

INVALID_SOCKET = -1


def _probe(handle: int) -> None:
    """Raise OSError unless ``handle`` refers to an open socket."""
    try:
        probe = _socket.socket(fileno=handle)
    except ValueError as exc:
        raise OSError(errno.EBADF, "Invalid socket handle.") from exc
    except OSError as exc:
        raise OSError(exc.errno, "Invalid socket handle.") from exc
    try:
        probe.getsockopt(_socket.SOL_SOCKET, _socket.SO_TYPE)
    except OSError as exc:
        raise OSError(exc.errno, "Invalid socket handle.") from exc
    finally:
        probe.detach()


def is_valid_socket(handle: int) -> bool:
    """Return True if ``handle`` is an open socket descriptor."""
    if handle == INVALID_SOCKET:
        return False
    try:
        _probe(handle)
    except OSError:
        return False
    return True


@total_ordering
class SocketHandle:
    """Owns a native socket descriptor and closes it when done.

    An empty handle holds ``INVALID_SOCKET``. Ownership is given up with
    :meth:`detach` and exchanged between handles with :func:`swap`.
    """

    def __init__(self, handle: int = INVALID_SOCKET) -> None:
        self._lock = threading.Lock()
        self._fd = INVALID_SOCKET
        self._error = 0
        if handle != INVALID_SOCKET:
            _probe(handle)
        self._fd = handle

    @classmethod
    def create(cls, domain: int, type: int, protocol: int) -> SocketHandle:
        """Open a new socket and return a handle that owns it."""
        if domain < 0 or type < 0 or protocol < 0:
            raise OSError(errno.EINVAL, "Failed to create socket.")
        try:
            sock = _socket.socket(domain, type, protocol)
        except OSError as exc:
            raise OSError(exc.errno, "Failed to create socket.") from exc
        return cls(sock.detach())

    def fileno(self) -> int:
        """Return the native descriptor, or INVALID_SOCKET when empty."""
        return self._fd

    def detach(self) -> int:
        """Give up ownership of the descriptor and return it."""
        with self._lock:
            fd, self._fd = self._fd, INVALID_SOCKET
        return fd

    def close(self) -> None:
        """Close the owned descriptor, if any. Never raises."""
        with self._lock:
            fd, self._fd = self._fd, INVALID_SOCKET
        if fd != INVALID_SOCKET:
            try:
                _socket.close(fd)
            except OSError:
                pass

    def set_error(self, error: int) -> None:
        """Record a system error code against this socket."""
        self._error = error

    def get_error(self) -> int:
        """Return the last recorded system error code (0 for none)."""
        return self._error

    def __bool__(self) -> bool:
        return self._fd != INVALID_SOCKET

    def __int__(self) -> int:
        return self._fd

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SocketHandle):
            return self._fd == other._fd
        if isinstance(other, int):
            return self._fd == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, SocketHandle):
            return self._fd < other._fd
        if isinstance(other, int):
            return self._fd < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._fd)

    def __enter__(self) -> SocketHandle:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __del__(self) -> None:
        if getattr(self, "_lock", None) is not None:
            self.close()

    def __repr__(self) -> str:
        return f"SocketHandle({self._fd})"


def swap(lhs: SocketHandle, rhs: SocketHandle) -> None:
    """Exchange the descriptors and error codes of two handles."""
    if lhs is rhs:
        return
    first, second = sorted((lhs, rhs), key=id)
    with first._lock, second._lock:
        lhs._fd, rhs._fd = rhs._fd, lhs._fd
        lhs._error, rhs._error = rhs._error, lhs._error