# dosfloppy

A library of building blocks for MS-DOS floppy and FAT tools: the wire
encoding of the floppyd remote-floppy protocol, buffered packet I/O for
the server side of a connection, disk geometry guessing, DOS-style
wildcard matching, offset limits, advisory device locking, repeated
partial I/O, and formatters for directory and attribute listings.

It has no dependencies outside the standard library. Device locking uses
`fcntl`, so that module needs a POSIX system.

## Installing

    pip install .

To run the test suite:

    pip install .[test]
    pytest

## Modules

### `dosfloppy.protocol`

Constants and encoding for the floppyd protocol. `Opcode` lists the
commands (`READ`, `WRITE`, `SEEK`, `FLUSH`, `CLOSE`, `IOCTL`, `OPRO`,
`OPRW`, `SEEK64`), `AuthStatus` the handshake results. `encode_dword`,
`decode_dword`, `encode_qword` and `decode_qword` convert big-endian
32 and 64 bit integers; `encode_packet` prefixes a payload with its
length. Decoding too few bytes raises `ProtocolError`; encoding a value
that does not fit raises `ValueError`.

```python
from dosfloppy.protocol import encode_packet, decode_dword

frame = encode_packet(b"\x00\x00\x00\x0b")
assert decode_dword(frame) == 4
```

### `dosfloppy.wire`

`BufferedSocket` wraps a socket: `write` queues small writes until
`flush`, `read` reads ahead, `read_dword`/`write_dword` move single
words, and `recv_packet(maxlength)` / `send_packet(payload)` move
length-prefixed packets. Oversized, empty or truncated packets raise
`ProtocolError`. `parse_port` accepts digits or a TCP service name
(returning 0 when unknown); `resolve_address` turns a dotted address or
host name into a dotted IPv4 address, raising `ValueError` if it cannot.

### `dosfloppy.geometry`

`Geometry` holds heads, sectors, tracks and the total sector count.
`compute_lba_geometry` returns a copy with missing fields filled in from
`tot_sectors`, using standard floppy layouts for small sizes and an
LBA-assist layout (63 sectors, 16 to 255 heads) otherwise.

```python
from dosfloppy.geometry import Geometry, compute_lba_geometry

g = compute_lba_geometry(Geometry(tot_sectors=2880))
# Geometry(heads=2, sectors=18, tracks=80, tot_sectors=2880)
```

### `dosfloppy.wildcard`

`match(string, pattern, length=None)` compares case-insensitively with
`?`, `*`, `[..]` ranges (including `^` negation) and `\` escapes.
`match_capture` returns the matched name with literal characters spelled
as in the pattern, or `None`.

```python
from dosfloppy.wildcard import match, match_capture

match("README.TXT", "*.txt")           # True
match_capture("readme.txt", "README.*")  # "README.txt"
```

### `dosfloppy.offsets`

`max_offset_bits`, `file_too_big`, `trunc_to_u32` and
`trunc_size_to_u32` check that offsets and sizes fit 32 bit fields
(raising `OverflowError` when they do not); `log_2` gives the exponent of
a power of two below 2**24, or 24.

### `dosfloppy.hashtable`

`DoubleHashTable(f1, f2, compare, size)` is an open-addressing table with
double hashing and caller-supplied hash functions. `add` returns the slot
used, `lookup` returns `(entry, slot)`, `remove(entry, hint)` removes that
very object; both raise `KeyError` when nothing is found. It supports
`len()` and iteration.

### `dosfloppy.locking`

`lock_device(fd, exclusive=False, timeout=30, nolock=False)` takes a
shared or exclusive `flock` lock, retrying every tenth of a second, and
returns `LockResult.ACQUIRED` or `LockResult.BUSY`. Other errors raise
`OSError`.

### `dosfloppy.forceio`

`force_pread(reader, start, length)` and `force_pwrite(writer, start,
data)` call a positional reader or writer until the whole transfer is
done or it stops making progress.

### `dosfloppy.listing`

`dotted_num` right-aligns a number with digits grouped by spaces,
`format_date` renders a date through a `yyyy`/`yy`/`mm`/`dd` template,
`format_time` gives `hh:mm` with an `a`/`p` suffix (or a space in 24 hour
mode), `format_summary` the file-count line and `format_serial` a volume
serial as `XXXX-XXXX`.

### `dosfloppy.attributes`

`Attribute` is the FAT attribute flag set. `parse_attribute_args` parses
`-i image`, `-p`, `-/`, `-X`, `-a`/`-h`/`-r`/`-s` and `+xyz`/`-xyz`
arguments into an `AttributeChange` and a list of file names;
`AttributeChange.apply` computes the new attribute byte and `is_view`
says whether nothing is to change. `format_view`, `format_concise` and
`format_replay` produce the long, concise and replayable listing lines.

## What this package does not do

It contains no floppyd server or client and installs no commands: there
is nothing here that listens for connections, authenticates users, opens
devices for remote access or connects to a remote drive. Nor does it read
or write FAT file systems; it supplies the helpers such programs use.