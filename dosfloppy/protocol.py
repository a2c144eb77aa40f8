"""Wire-level constants and encoding helpers for the floppyd protocol.

All multi-byte integers travel in network byte order (big endian).  A
packet is a 4 byte length followed by that many bytes of payload.
"""

from __future__ import annotations

import struct
from enum import IntEnum

DEFAULT_PORT = 5703

PROTOCOL_VERSION_OLD = 10
PROTOCOL_VERSION = 11

CAP_EXPLICIT_OPEN = 1
"""Server supports explicit open, useful for signalling read-only disks."""
CAP_LARGE_SEEK = 2
"""Server supports 64 bit seeks."""

DWORD_ERR = 0xFFFFFFFF

_DWORD = struct.Struct(">I")
_QWORD = struct.Struct(">Q")


class Opcode(IntEnum):
    """Commands a client can send to the server."""

    READ = 0
    WRITE = 1
    SEEK = 2
    FLUSH = 3
    CLOSE = 4
    IOCTL = 5
    OPRO = 6
    OPRW = 7
    SEEK64 = 8


class AuthStatus(IntEnum):
    """Result codes of the authentication handshake."""

    SUCCESS = 0
    PACKETOVERSIZE = 1
    AUTHFAILED = 2
    WRONGVERSION = 3
    DEVLOCKED = 4
    BADPACKET = 5
    IO_ERROR = 6


class ProtocolError(Exception):
    """Raised when data on the wire does not follow the protocol."""


def _encode(codec: struct.Struct, value: int, bits: int) -> bytes:
    if not -(1 << (bits - 1)) <= value < (1 << bits):
        raise ValueError(f"{value} does not fit in {bits} bits")
    return codec.pack(value & ((1 << bits) - 1))


def _decode(codec: struct.Struct, data: bytes) -> int:
    size = codec.size
    if len(data) < size:
        raise ProtocolError(f"need {size} bytes, got {len(data)}")
    return codec.unpack_from(bytes(data[:size]))[0]


def encode_dword(value: int) -> bytes:
    """Encode a 32 bit integer (signed or unsigned) as 4 big-endian bytes."""
    return _encode(_DWORD, value, 32)


def decode_dword(data: bytes) -> int:
    """Decode the first 4 bytes of ``data`` as an unsigned big-endian integer."""
    return _decode(_DWORD, data)


def encode_qword(value: int) -> bytes:
    """Encode a 64 bit integer (signed or unsigned) as 8 big-endian bytes."""
    return _encode(_QWORD, value, 64)


def decode_qword(data: bytes) -> int:
    """Decode the first 8 bytes of ``data`` as an unsigned big-endian integer."""
    return _decode(_QWORD, data)


def encode_packet(payload: bytes) -> bytes:
    """Frame ``payload`` with its length prefix."""
    return encode_dword(len(payload)) + bytes(payload)