"""Open-addressing hash table with double hashing and caller-supplied hashes."""

from __future__ import annotations

from typing import Any, Callable, Iterator

_SIZES = (
    5, 11, 23, 47, 97, 197, 397, 797, 1597, 3203, 6421, 12853,
    25717, 51437, 102877, 205759, 411527, 823117, 1646237,
    3292489, 6584983, 13169977, 26339969, 52679969, 105359939,
    210719881, 421439783, 842879579, 1685759167,
)

_UNALLOCATED = object()
_DELETED = object()


class DoubleHashTable:
    """Hash table probing with a second hash function.

    ``f1`` and ``f2`` map an entry to a non-negative integer; ``compare``
    returns true when a stored entry matches the one looked up.  Entries
    may be stored more than once: :meth:`add` does not check for repeats.
    """

    def __init__(self, f1: Callable[[Any], int], f2: Callable[[Any], int],
                 compare: Callable[[Any, Any], bool], size: int = 0) -> None:
        self._f1 = f1
        self._f2 = f2
        self._compare = compare
        self._size = 0
        self._allocate(size)

    def _allocate(self, size: int) -> None:
        for factor in (4, 2, 1):
            chosen = next((s for s in _SIZES if s > size * factor), None)
            if chosen is not None:
                break
        else:
            raise MemoryError(f"hash table for {size} entries is too large")
        chosen = max(chosen, self._size)  # never shrink
        self._max = chosen * 4 // 5 - 2
        self._size = chosen
        self._fill = 0   # slots in use or deleted
        self._inuse = 0  # slots in use
        self._entries: list[Any] = [_UNALLOCATED] * chosen

    def _step(self, entry: Any) -> int:
        return self._f2(entry) % (self._size - 1)

    def _insert(self, entry: Any) -> int:
        pos = self._f1(entry) % self._size
        step = None
        while self._entries[pos] is not _UNALLOCATED and self._entries[pos] is not _DELETED:
            if step is None:
                step = self._step(entry)
            pos = (pos + step + 1) % self._size
        if self._entries[pos] is _UNALLOCATED:
            self._fill += 1
        self._inuse += 1
        self._entries[pos] = entry
        return pos

    def _rehash(self) -> None:
        old = self._entries
        self._allocate(((self._inuse + 1) * 4 + self._fill) // 5)
        for slot in old:
            if slot is not _UNALLOCATED and slot is not _DELETED:
                self._insert(slot)

    def add(self, entry: Any) -> int:
        """Insert ``entry`` and return the slot it was stored in."""
        if self._fill >= self._max:
            self._rehash()
        if self._fill == self._size:
            raise MemoryError("hash table is full")
        return self._insert(entry)

    def _find(self, entry: Any, identity: bool) -> int | None:
        pos = self._f1(entry) % self._size
        ttl = self._size
        step = None
        free = None
        while ttl:
            slot = self._entries[pos]
            if slot is _UNALLOCATED:
                break
            if slot is not _DELETED and (
                    slot is entry if identity else self._compare(slot, entry)):
                break
            if step is None:
                step = self._step(entry)
            if free is None and slot is _DELETED:
                free = pos
            pos = (pos + step + 1) % self._size
            ttl -= 1
        if not ttl or self._entries[pos] is _UNALLOCATED:
            return None
        if free is not None:
            # move the entry forward to shorten the next probe sequence
            self._entries[free] = self._entries[pos]
            self._entries[pos] = _DELETED
            pos = free
        return pos

    def lookup(self, entry: Any) -> tuple[Any, int]:
        """Return ``(stored_entry, slot)`` for a matching entry.

        Raises KeyError when nothing matches.
        """
        pos = self._find(entry, identity=False)
        if pos is None:
            raise KeyError(entry)
        return self._entries[pos], pos

    def remove(self, entry: Any, hint: int | None = None) -> None:
        """Remove this very object, using ``hint`` as its slot if it is right.

        Raises KeyError when the object is not stored.
        """
        if hint is not None and 0 <= hint < self._size and self._entries[hint] is entry:
            pos = hint
        else:
            pos = self._find(entry, identity=True)
            if pos is None:
                raise KeyError(entry)
        self._inuse -= 1
        self._entries[pos] = _DELETED

    def __len__(self) -> int:
        return self._inuse

    def __iter__(self) -> Iterator[Any]:
        for slot in list(self._entries):
            if slot is not _UNALLOCATED and slot is not _DELETED:
                yield slot