"""Repeat partial reads and writes until a whole transfer is done."""

from __future__ import annotations

from typing import Callable

Reader = Callable[[int, int], bytes]
Writer = Callable[[int, bytes], int]


def force_pread(reader: Reader, start: int, length: int) -> bytes:
    """Read ``length`` bytes at ``start`` with ``reader(where, length)``.

    Stops early at end of data.  An error raised before anything was read
    propagates; after a partial read, what was read so far is returned.
    """
    parts: list[bytes] = []
    done = 0
    while length:
        try:
            chunk = reader(start, length)
        except OSError:
            if done:
                break
            raise
        if not chunk:
            break
        if len(chunk) > length:
            raise ValueError("reader returned more data than requested")
        parts.append(chunk)
        start += len(chunk)
        done += len(chunk)
        length -= len(chunk)
    return b"".join(parts)


def force_pwrite(writer: Writer, start: int, data: bytes) -> int:
    """Write all of ``data`` at ``start`` with ``writer(where, data)``.

    Returns the number of bytes written, fewer if the writer stops
    accepting data.  An error raised before anything was written propagates.
    """
    view = memoryview(bytes(data))
    done = 0
    while view:
        try:
            written = writer(start, bytes(view))
        except OSError:
            if done:
                break
            raise
        if written <= 0:
            break
        if written > len(view):
            raise ValueError("writer reported more data than given")
        view = view[written:]
        start += written
        done += written
    return done