"""Buffered packet I/O on the server side of a floppyd connection."""

from __future__ import annotations

import socket
from typing import Any

from .protocol import DWORD_ERR, ProtocolError, decode_dword, encode_dword

MAX_XAUTHORITY_LENGTH = 3000
MAX_DATA_REQUEST = 3000000
BUFFERED_IO_SIZE = 16348


class BufferedSocket:
    """Socket wrapper that batches small writes and reads ahead."""

    def __init__(self, sock: Any) -> None:
        self.sock = sock
        self._in = b""
        self._out = bytearray()

    def read(self, nbytes: int) -> bytes:
        """Read up to ``nbytes``; may return fewer, and b"" at end of stream."""
        if nbytes <= len(self._in):
            data, self._in = self._in[:nbytes], self._in[nbytes:]
            return data
        head, self._in = self._in, b""
        need = nbytes - len(head)
        if need > BUFFERED_IO_SIZE:
            return head + self.sock.recv(need)
        chunk = self.sock.recv(BUFFERED_IO_SIZE)
        if len(chunk) < need:
            return head + chunk
        self._in = chunk[need:]
        return head + chunk[:need]

    def write(self, data: bytes) -> int:
        """Queue ``data``, sending directly when it would overflow the buffer."""
        if len(self._out) + len(data) > BUFFERED_IO_SIZE:
            self.flush()
            self.sock.sendall(data)
            return len(data)
        self._out += data
        return len(data)

    def flush(self) -> None:
        """Send everything queued so far."""
        if self._out:
            data = bytes(self._out)
            self._out.clear()
            self.sock.sendall(data)

    def read_dword(self) -> int:
        """Read one big-endian 32 bit word; raise ProtocolError at end of stream."""
        data = b""
        while len(data) < 4:
            chunk = self.read(4 - len(data))
            if not chunk:
                raise ProtocolError("connection closed while reading a word")
            data += chunk
        return decode_dword(data)

    def write_dword(self, value: int) -> None:
        """Queue one big-endian 32 bit word."""
        self.write(encode_dword(value))

    def recv_packet(self, maxlength: int) -> bytes:
        """Read one length-prefixed packet of at most ``maxlength`` bytes.

        Raises ProtocolError for oversized, empty or truncated packets.
        """
        length = self.read_dword()
        if length > maxlength or length == DWORD_ERR:
            raise ProtocolError(f"packet of {length} bytes exceeds {maxlength}")
        parts = []
        remaining = length
        while remaining:
            chunk = self.read(remaining)
            if not chunk:
                raise ProtocolError("connection closed inside a packet")
            parts.append(chunk)
            remaining -= len(chunk)
        if length == 0:
            raise ProtocolError("empty packet")
        return b"".join(parts)

    def send_packet(self, payload: bytes) -> None:
        """Send ``payload`` framed with its length, and flush."""
        self.write_dword(len(payload))
        self.write(bytes(payload))
        self.flush()


def parse_port(text: str) -> int:
    """Port number given as digits or as a TCP service name; 0 if unknown."""
    port = 0
    rest = text
    while rest and rest[0] in "0123456789":
        port = (port * 10 + int(rest[0])) & 0xFFFF
        rest = rest[1:]
    if rest or port <= 0:
        try:
            port = socket.getservbyname(text, "tcp")
        except OSError:
            port = 0
    return port


def resolve_address(text: str) -> str:
    """IPv4 address, in dotted form, of a numeric address or host name.

    Raises ValueError when the host cannot be resolved.
    """
    try:
        return socket.inet_ntoa(socket.inet_aton(text))
    except OSError:
        pass
    try:
        return socket.gethostbyname(text)
    except OSError as exc:
        raise ValueError(f"cannot resolve address {text!r}") from exc