"""List marker scanner.

Scans one raw line and reports marker boundaries plus a coarse kind.
Recognized markers (after at most 3 spaces of indentation):

- Bullets: ``-``, ``*``, ``+``
- Continuation: ``#.`` or ``#)``
- Numeric: 1-9 ASCII digits followed by ``.`` or ``)``
- Alphabetic/roman: 1-6 ASCII letters followed by ``.`` or ``)``

A marker must be followed by whitespace or the end of the line: ``2.two``
is not a list item.

No regex in the hot path; every input has a defined classification.
"""

from __future__ import annotations

from fancylists.lists.types import NO_MARKER, MarkerKind, ScanResult
from fancylists.utils.text import indent_width

BULLET_CHARS: frozenset[str] = frozenset("-*+")
ORDERED_DELIMITERS: frozenset[str] = frozenset(".)")

MAX_DIGITS = 9
MAX_LETTERS = 6


def is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_ascii_letter(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z"


def scan_marker(line: str, *, strict: bool = False) -> ScanResult:
    """Scan a line for a list item marker.

    Args:
        line: One line of source, optionally ending in a newline
        strict: Also reject markers indented by 4 or more columns

    Returns:
        ScanResult; ``kind`` is MarkerKind.NONE when the line is not a
        list item

    Example:
        >>> r = scan_marker("iv. Fourth\\n")
        >>> r.kind, r.token("iv. Fourth\\n")
        (<MarkerKind.ORDERED_FANCY: 'ordered-fancy'>, 'iv')

    """
    length = len(line)
    pos = 0
    while pos < length and line[pos] == " ":
        pos += 1
    if strict and pos >= 4:
        return NO_MARKER
    # Indented code territory in either mode
    if pos > 3 or pos >= length:
        return NO_MARKER

    indent = pos
    start = pos
    char = line[pos]

    if char in BULLET_CHARS:
        pos += 1
        marker_end = pos
        kind = MarkerKind.BULLET
    elif char == "#":
        pos += 1
        if pos >= length or line[pos] not in ORDERED_DELIMITERS:
            return NO_MARKER
        marker_end = pos
        pos += 1
        kind = MarkerKind.ORDERED_FANCY
    elif is_ascii_digit(char):
        while pos < length and is_ascii_digit(line[pos]):
            pos += 1
        if pos - start > MAX_DIGITS:
            return NO_MARKER
        if pos >= length or line[pos] not in ORDERED_DELIMITERS:
            return NO_MARKER
        marker_end = pos
        pos += 1
        kind = MarkerKind.ORDERED_PLAIN
    elif is_ascii_letter(char):
        while pos < length and pos - start < MAX_LETTERS and is_ascii_letter(line[pos]):
            pos += 1
        if pos >= length or line[pos] not in ORDERED_DELIMITERS:
            return NO_MARKER
        marker_end = pos
        pos += 1
        kind = MarkerKind.ORDERED_FANCY
    else:
        return NO_MARKER

    marker_stop = pos

    # Content glued to the marker ("2.two") disqualifies the line
    if pos < length and line[pos] != "\n":
        width, _ = indent_width(line[pos:], 0)
        if width == 0:
            return NO_MARKER

    if pos >= length:
        return ScanResult(kind, indent, start, marker_end, marker_stop)

    content_end = length
    if line[-1] == "\n" and line[pos] != "\n":
        content_end -= 1
    return ScanResult(kind, indent, start, marker_end, marker_stop, pos, content_end)


def parse_start(line: str, result: ScanResult) -> int:
    """Numeric value of an ORDERED_PLAIN marker (``"003."`` -> 3)."""
    return int(result.token(line))


__all__ = [
    "BULLET_CHARS",
    "ORDERED_DELIMITERS",
    "scan_marker",
    "parse_start",
    "is_ascii_digit",
    "is_ascii_letter",
]
