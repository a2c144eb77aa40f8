import socket
from unittest import mock

import pytest

from dosfloppy.protocol import ProtocolError, encode_dword, encode_packet
from dosfloppy.wire import (
    BUFFERED_IO_SIZE,
    BufferedSocket,
    parse_port,
    resolve_address,
)


@pytest.fixture
def pair():
    left, right = socket.socketpair()
    yield BufferedSocket(left), right
    left.close()
    right.close()


def _recv_exact(sock, n):
    data = b""
    while len(data) < n:
        chunk = sock.recv(n - len(data))
        if not chunk:
            break
        data += chunk
    return data


def test_send_packet_frames_payload(pair):
    bs, peer = pair
    bs.send_packet(b"hello")
    assert _recv_exact(peer, 9) == b"\x00\x00\x00\x05hello"


def test_recv_packet_round_trip(pair):
    bs, peer = pair
    peer.sendall(encode_packet(b"payload"))
    assert bs.recv_packet(100) == b"payload"


def test_recv_two_packets_in_one_chunk(pair):
    bs, peer = pair
    peer.sendall(encode_packet(b"\x07") + encode_packet(b"abcd"))
    assert bs.recv_packet(1) == b"\x07"
    assert bs.recv_packet(4) == b"abcd"


def test_recv_packet_oversized(pair):
    bs, peer = pair
    peer.sendall(encode_packet(b"12345"))
    with pytest.raises(ProtocolError):
        bs.recv_packet(4)


def test_recv_packet_error_length(pair):
    bs, peer = pair
    peer.sendall(b"\xff\xff\xff\xff")
    with pytest.raises(ProtocolError):
        bs.recv_packet(0xFFFFFFFF)


def test_recv_empty_packet_rejected(pair):
    bs, peer = pair
    peer.sendall(encode_dword(0))
    with pytest.raises(ProtocolError):
        bs.recv_packet(10)


def test_recv_truncated_packet(pair):
    bs, peer = pair
    peer.sendall(encode_dword(10) + b"abc")
    peer.shutdown(socket.SHUT_WR)
    with pytest.raises(ProtocolError):
        bs.recv_packet(10)


def test_read_dword_at_end_of_stream(pair):
    bs, peer = pair
    peer.sendall(b"\x00\x01")
    peer.shutdown(socket.SHUT_WR)
    with pytest.raises(ProtocolError):
        bs.read_dword()


def test_dword_round_trip(pair):
    bs, peer = pair
    bs.write_dword(0xDEADBEEF)
    bs.flush()
    peer.sendall(_recv_exact(peer, 4))
    assert bs.read_dword() == 0xDEADBEEF


def test_read_serves_from_buffer(pair):
    bs, peer = pair
    peer.sendall(b"0123456789")
    assert bs.read(4) == b"0123"
    peer.close()
    assert bs.read(6) == b"456789"
    assert bs.read(1) == b""


def test_read_returns_short_when_less_available(pair):
    bs, peer = pair
    peer.sendall(b"abc")
    peer.shutdown(socket.SHUT_WR)
    assert bs.read(10) == b"abc"


def test_large_read_bypasses_buffer(pair):
    bs, peer = pair
    data = bytes(range(256)) * 80
    assert len(data) > BUFFERED_IO_SIZE
    peer.sendall(data)
    peer.shutdown(socket.SHUT_WR)
    got = b""
    while len(got) < len(data):
        chunk = bs.read(len(data) - len(got))
        if not chunk:
            break
        got += chunk
    assert got == data


def test_small_writes_wait_for_flush(pair):
    bs, peer = pair
    assert bs.write(b"abc") == 3
    peer.setblocking(False)
    with pytest.raises(BlockingIOError):
        peer.recv(10)
    bs.flush()
    peer.setblocking(True)
    assert _recv_exact(peer, 3) == b"abc"


def test_large_write_keeps_order(pair):
    bs, peer = pair
    bs.write(b"ab")
    big = b"x" * (BUFFERED_IO_SIZE + 10)
    assert bs.write(big) == len(big)
    assert _recv_exact(peer, len(big) + 2) == b"ab" + big


def test_parse_port_digits():
    assert parse_port("5703") == 5703


def test_parse_port_unknown_service():
    with mock.patch("socket.getservbyname", side_effect=OSError):
        assert parse_port("no-such-service") == 0


def test_parse_port_zero_falls_back_to_service_lookup():
    with mock.patch("socket.getservbyname", side_effect=OSError) as lookup:
        assert parse_port("0") == 0
    lookup.assert_called_once_with("0", "tcp")


def test_parse_port_service_name():
    with mock.patch("socket.getservbyname", return_value=80) as lookup:
        assert parse_port("http") == 80
    lookup.assert_called_once_with("http", "tcp")


def test_resolve_numeric_address():
    assert resolve_address("127.0.0.1") == "127.0.0.1"


def test_resolve_broadcast_address():
    assert resolve_address("255.255.255.255") == "255.255.255.255"


def test_resolve_host_name():
    with mock.patch("socket.gethostbyname", return_value="10.0.0.7"):
        assert resolve_address("fileserver") == "10.0.0.7"


def test_resolve_unknown_host():
    with mock.patch("socket.gethostbyname", side_effect=socket.gaierror):
        with pytest.raises(ValueError):
            resolve_address("fileserver")