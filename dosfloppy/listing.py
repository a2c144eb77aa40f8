"""Text formatting used by directory listings: numbers, dates, times, summaries."""

from __future__ import annotations

DEFAULT_DATE_TEMPLATE = "yyyy-mm-dd"


def dotted_num(num: int, width: int) -> str:
    """Format ``num`` right-aligned in ``width`` columns, digits grouped by three.

    Groups are separated by spaces.  A number wider than the field keeps
    only its last ``width`` characters.
    """
    if num < 0:
        raise ValueError(f"cannot format negative number {num}")
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    grouped = f"{num:,}".replace(",", " ")
    return grouped.rjust(width)[-width:]


def format_date(year: int, month: int, day: int,
                template: str = DEFAULT_DATE_TEMPLATE) -> str:
    """Render a date through a template of yyyy, yy, mm and dd placeholders.

    Placeholders are recognised regardless of case; other characters are
    copied as they are.
    """
    parts: list[str] = []
    pos = 0
    while pos < len(template):
        head = template[pos:pos + 4].lower()
        if head == "yyyy":
            parts.append(f"{year:04d}")
            pos += 4
        elif head[:2] == "yy":
            parts.append(f"{year % 100:02d}")
            pos += 2
        elif head[:2] == "dd":
            parts.append(f"{day:02d}")
            pos += 2
        elif head[:2] == "mm":
            parts.append(f"{month:02d}")
            pos += 2
        else:
            parts.append(template[pos])
            pos += 1
    return "".join(parts)


def format_time(hour: int, minute: int, twenty_four_hour: bool = False) -> str:
    """Render a time as ``hh:mm`` followed by 'a', 'p' or a space."""
    if twenty_four_hour:
        suffix = " "
    else:
        suffix = "p" if hour >= 12 else "a"
        if hour > 12:
            hour -= 12
        if hour == 0:
            hour = 12
    return f"{hour:2d}:{minute:02d}{suffix}"


def format_summary(files: int, size: int) -> str:
    """Summary line giving the number of files and the bytes they hold."""
    if not files:
        return "No files"
    plural = " " if files == 1 else "s"
    return f"      {files:3d} file{plural}       {dotted_num(size, 13)} bytes"


def format_serial(serial: int) -> str:
    """Volume serial number as two groups of four hex digits."""
    return f"{(serial >> 16) & 0xFFFF:04X}-{serial & 0xFFFF:04X}"