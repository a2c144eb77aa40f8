"""Case-insensitive shell-style matching of '?', '*', '[..]' and '\\'."""

from __future__ import annotations


def _at(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else ""


def _upper(ch: str) -> str:
    up = ch.upper()
    return up if len(up) == 1 else ch


def _lower(ch: str) -> str:
    low = ch.lower()
    return low if len(low) == 1 else ch


def _same(a: str, b: str) -> bool:
    return _upper(a) == _upper(b)


def _in_range(ch: str, pattern: str, pi: int) -> tuple[bool, bool, int]:
    """Check ``ch`` against the range starting at ``pi``.

    Returns (found, reverse, index of the closing bracket).
    """
    reverse = _at(pattern, pi) == "^"
    if reverse:
        pi += 1
    found = False
    while (first := _at(pattern, pi)) != "]":
        if not first:
            return False, reverse, pi  # range never closed
        pi += 1
        if _at(pattern, pi) == "-":
            pi += 1
            last = _at(pattern, pi)
            if last == "]":
                # a trailing '-' stands for itself
                if ch == first or ch == "-":
                    found = True
                break
            pi += 1
            if ch and first <= ch <= last:
                found = True
        elif ch == first:
            found = True
    return found, reverse, pi


def _parse_range(pattern: str, pi: int, ch: str) -> tuple[bool, int, str]:
    found, reverse, end = _in_range(ch, pattern, pi)
    if found:
        return not reverse, end, ch
    for variant in (_lower(ch), _upper(ch)):
        found, reverse, _ = _in_range(variant, pattern, pi)
        if found:
            return not reverse, end, variant
    return reverse, end, ch


def _put(out: list[str] | None, index: int, ch: str) -> None:
    if out is None:
        return
    if index < len(out):
        out[index] = ch
    else:
        out.append(ch)


def _match(s: str, si: int, p: str, pi: int, out: list[str] | None,
           oi: int, length: int) -> int | None:
    """Return the end of the captured output on a match, else None."""
    while _at(p, pi) and length:
        c = p[pi]
        if c == "?":
            if si >= len(s):
                return None
            _put(out, oi, s[si])
            oi += 1
        elif c == "*":
            while _at(p, pi) == "*" and length:
                pi += 1
                length -= 1
            while si < len(s):
                end = _match(s, si, p, pi, out, oi, length)
                if end is not None:
                    return end
                _put(out, oi, s[si])
                oi += 1
                si += 1
            continue
        elif c == "[":
            pi += 1
            length -= 1
            if si >= len(s):
                return None
            ok, pi, ch = _parse_range(p, pi, s[si])
            if not ok:
                return None
            _put(out, oi, ch)
            oi += 1
        else:
            if c == "\\":
                pi += 1
                length -= 1
            pc = _at(p, pi)
            if not _same(_at(s, si), pc):
                return None
            _put(out, oi, pc)
            oi += 1
        pi += 1
        length -= 1
        si += 1
    if si < len(s):
        return None
    return oi


def match(string: str, pattern: str, length: int | None = None) -> bool:
    """True if ``string`` matches the first ``length`` characters of ``pattern``.

    ``length`` of None means the whole pattern.
    """
    limit = -1 if length is None else length
    return _match(string, 0, pattern, 0, None, 0, limit) is not None


def match_capture(string: str, pattern: str,
                  length: int | None = None) -> str | None:
    """Like :func:`match`, but return the name as spelled by the pattern.

    Literal characters take the pattern's case, wildcard characters the
    string's.  Returns None when there is no match.
    """
    limit = -1 if length is None else length
    out: list[str] = []
    end = _match(string, 0, pattern, 0, out, 0, limit)
    if end is None:
        return None
    return "".join(out[:end])