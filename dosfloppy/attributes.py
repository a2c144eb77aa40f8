"""Viewing and changing the attribute flags of DOS directory entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag


class Attribute(IntFlag):
    """Attribute bits of a FAT directory entry."""

    READONLY = 0x01
    HIDDEN = 0x02
    SYSTEM = 0x04
    LABEL = 0x08
    DIRECTORY = 0x10
    ARCHIVE = 0x20


_LETTERS = {
    "A": Attribute.ARCHIVE,
    "H": Attribute.HIDDEN,
    "R": Attribute.READONLY,
    "S": Attribute.SYSTEM,
}


@dataclass
class AttributeChange:
    """Bits to set and mask of bits to keep, plus how to report entries."""

    add: int = 0
    remove: int = 0xFF
    recursive: bool = False
    concise: bool = False
    replay: bool = False
    image: str | None = field(default=None)

    def apply(self, attr: int) -> int:
        """Attribute byte after the change."""
        return ((attr & self.remove) | self.add) & 0xFF

    def is_view(self) -> bool:
        """True when nothing is to be changed, only shown."""
        return self.remove == 0xFF and not self.add


def letter_to_code(letter: str) -> Attribute:
    """Attribute bit for one of the letters A, H, R, S (any case)."""
    try:
        return _LETTERS[letter.upper()]
    except KeyError:
        raise ValueError(f"unknown attribute letter {letter!r}") from None


def parse_attribute_args(args: list[str]) -> tuple[AttributeChange, list[str]]:
    """Parse options, then ``+xyz``/``-xyz`` changes, then file names.

    Returns the change and the file names.  Raises ValueError for unknown
    options or letters and when no file is named.
    """
    args = list(args)
    change = AttributeChange()
    want_usage = False
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--":
            i += 1
            break
        if not arg.startswith("-") or arg == "-":
            break
        j = 1
        while j < len(arg):
            c = arg[j]
            if c == "i":
                rest = arg[j + 1:]
                if not rest:
                    i += 1
                    if i >= len(args):
                        raise ValueError("option -i requires an argument")
                    rest = args[i]
                change.image = rest
                break
            if c == "p":
                change.replay = True
            elif c == "/":
                change.recursive = True
            elif c == "X":
                change.concise = True
            elif c in "ahrsAHRS":
                if c == "h":
                    want_usage = True
                change.remove &= ~letter_to_code(c) & 0xFF
            else:
                raise ValueError(f"unknown option -{c}")
            j += 1
        i += 1

    while i < len(args) and args[i].startswith(("+", "-")):
        sign, letters = args[i][0], args[i][1:]
        for letter in letters:
            code = letter_to_code(letter)
            if sign == "+":
                change.add |= code
            else:
                change.remove &= ~code & 0xFF
        i += 1

    files = args[i:]
    if not files:
        if want_usage:
            raise ValueError("usage requested")
        raise ValueError("no file named")
    return change, files


def format_view(attr: int, name: str) -> str:
    """Long listing line: fixed columns for A, S, H and R, then the name."""
    archive = "A" if attr & Attribute.ARCHIVE else " "
    system = "S" if attr & Attribute.SYSTEM else " "
    hidden = "H" if attr & Attribute.HIDDEN else " "
    readonly = "R" if attr & Attribute.READONLY else " "
    return f"  {archive}  {system}{hidden}{readonly}     {name}"


def format_concise(attr: int, name: str | None = None) -> str:
    """Letters of the set bits (A, D, S, H, R), then the name if given."""
    letters = "".join(
        letter for bit, letter in (
            (Attribute.ARCHIVE, "A"),
            (Attribute.DIRECTORY, "D"),
            (Attribute.SYSTEM, "S"),
            (Attribute.HIDDEN, "H"),
            (Attribute.READONLY, "R"),
        ) if attr & bit
    )
    if name is not None:
        return f"{letters} {name}"
    return letters


def format_replay(attr: int, name: str) -> str | None:
    """Command that recreates unusual attributes, or None if they are usual.

    Archive is usual on files and unusual on directories.
    """
    archive = bool(attr & Attribute.ARCHIVE)
    directory = bool(attr & Attribute.DIRECTORY)
    system = bool(attr & Attribute.SYSTEM)
    hidden = bool(attr & Attribute.HIDDEN)
    if archive != directory and not system and not hidden:
        return None
    parts = ["mattrib "]
    if archive and directory:
        parts.append("+a ")
    if not archive and not directory:
        parts.append("-a ")
    if system:
        parts.append("+s ")
    if hidden:
        parts.append("+h ")
    parts.append(name)
    return "".join(parts)