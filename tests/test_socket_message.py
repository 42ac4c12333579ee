import socket

from iosched.socket_message import MessageHeader, NativeMessage


def test_empty_header():
    native = MessageHeader().native()
    assert native.namelen == 0
    assert native.iovlen == 0
    assert native.iov == ()
    assert native.controllen == 0
    assert native.flags == 0


def test_lengths_and_flags():
    header = MessageHeader(
        msg_name=bytearray(16),
        msg_iov=[bytearray(256), bytearray(128)],
        msg_control=bytearray(32),
        flags=7,
    )
    native = header.native()
    assert native.namelen == 16
    assert native.iovlen == 2
    assert [len(view) for view in native.iov] == [256, 128]
    assert native.controllen == 32
    assert native.flags == 7


def test_native_shares_memory():
    buffer = bytearray(b"Hello")
    name = bytearray(4)
    native = MessageHeader(msg_name=name, msg_iov=[buffer]).native()
    native.iov[0][0:1] = b"J"
    native.name[0:2] = b"ab"
    assert buffer == bytearray(b"Jello")
    assert name[:2] == bytearray(b"ab")


def test_native_is_frozen():
    native = MessageHeader().native()
    try:
        native.flags = 1
    except AttributeError:
        changed = False
    else:
        changed = True
    assert changed is False
    assert isinstance(native, NativeMessage) and native.flags == 0


def test_send_recv_msg_round_trip():
    message = bytearray(b"Hello, world!\x00")
    send = MessageHeader(msg_iov=[message]).native()
    sender, receiver = socket.socketpair(socket.AF_UNIX, socket.SOCK_STREAM)
    with sender, receiver:
        sent = sender.sendmsg(send.iov, [], send.flags)
        assert sent == 14
        received = bytearray(14)
        recv = MessageHeader(msg_iov=[received]).native()
        length, _, _, _ = receiver.recvmsg_into(recv.iov, 0, recv.flags)
    assert length == 14
    assert bytes(received) == b"Hello, world!\x00"


def test_scatter_receive_into_two_buffers():
    first = bytearray(5)
    second = bytearray(5)
    recv = MessageHeader(msg_iov=[first, second]).native()
    sender, receiver = socket.socketpair(socket.AF_UNIX, socket.SOCK_STREAM)
    with sender, receiver:
        sender.sendall(b"abcdefghij")
        length, _, _, _ = receiver.recvmsg_into(recv.iov)
    assert length == 10
    assert bytes(first) == b"abcde"
    assert bytes(second) == b"fghij"