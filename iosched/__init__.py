"""Thread-safe socket handles and scatter/gather message headers for POSIX sockets."""

__version__ = "0.1.0"
__all__ = ["socket_handle", "socket_message"]