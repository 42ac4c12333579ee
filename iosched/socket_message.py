"""Message headers for scatter/gather socket I/O."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class NativeMessage:
    """Flat view of a message header as the system call expects it.

    The views share memory with the buffers of the header they came from.
    """

    name: memoryview
    namelen: int
    iov: tuple[memoryview, ...]
    iovlen: int
    control: memoryview
    controllen: int
    flags: int


@dataclass
class MessageHeader:
    """Address, data buffers, ancillary data and flags of one message."""

    msg_name: Any = field(default_factory=bytearray)
    msg_iov: list[Any] = field(default_factory=list)
    msg_control: Any = field(default_factory=bytearray)
    flags: int = 0

    def native(self) -> NativeMessage:
        """Return a native view over this header's buffers."""
        name = memoryview(self.msg_name)
        iov = tuple(memoryview(buffer) for buffer in self.msg_iov)
        control = memoryview(self.msg_control)
        return NativeMessage(
            name=name,
            namelen=name.nbytes,
            iov=iov,
            iovlen=len(iov),
            control=control,
            controllen=control.nbytes,
            flags=self.flags,
        )