"""Text and indentation utilities for fancylists.

Column arithmetic follows CommonMark: a tab advances to the next multiple
of 4 columns. ``current_pos`` arguments are the column at which the given
text starts, so tab widths are computed relative to the full line.

Example:
    >>> from fancylists.utils.text import indent_width, slugify
    >>> indent_width("  - item", 0)
    (2, 2)
    >>> slugify("Hello World!")
    'hello-world'
"""

from __future__ import annotations

import html as html_module
import re

_SPACE_CHARS = frozenset(" \t\n\r\f\v")


def tab_width(current_pos: int) -> int:
    """Width of a tab that starts at column ``current_pos``."""
    return 4 - current_pos % 4


def is_blank(text: str) -> bool:
    """True if text contains only whitespace (or nothing)."""
    for char in text:
        if char not in _SPACE_CHARS:
            return False
    return True


def indent_width(text: str, current_pos: int) -> tuple[int, int]:
    """Measure leading indentation.

    Args:
        text: Text to measure
        current_pos: Column at which ``text`` starts

    Returns:
        Tuple of (indent width in columns, index of first non-indent char)

    """
    width = 0
    pos = 0
    for char in text:
        if char == " ":
            width += 1
        elif char == "\t":
            width += tab_width(current_pos + width)
        else:
            break
        pos += 1
    return width, pos


def indent_position(text: str, current_pos: int, width: int) -> tuple[int, int]:
    """Find the index at which ``width`` columns of indentation end.

    A tab that straddles the requested width is consumed and the columns
    it overshoots are reported as padding.

    Args:
        text: Text to scan
        current_pos: Column at which ``text`` starts
        width: Indentation width to consume

    Returns:
        Tuple of (index, padding), or (-1, -1) if the text is not indented
        by at least ``width`` columns.

    """
    if width == 0:
        return 0, 0
    consumed = 0
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char == "\t" and consumed < width:
            consumed += tab_width(current_pos + consumed)
        elif char == " " and consumed < width:
            consumed += 1
        else:
            break
        index += 1
    if consumed >= width:
        return index, consumed - width
    return -1, -1


def slugify(text: str, separator: str = "-") -> str:
    """Convert heading text to a URL-safe slug.

    Preserves Unicode word characters so international headings keep
    readable anchors.

    Examples:
        >>> slugify("Hello World!")
        'hello-world'
        >>> slugify("Test &amp; Code")
        'test-code'
    """
    if not text:
        return ""
    text = html_module.unescape(text).lower().strip()
    text = re.sub(r"[^\w\s-]", "", text)
    text = re.sub(r"[-\s]+", separator, text)
    return text.strip(separator)


def is_thematic_break(line: str, current_pos: int) -> bool:
    """True for three or more ``*``, ``-`` or ``_`` with optional spaces.

    Example:
        >>> is_thematic_break(" - - -\\n", 0), is_thematic_break("--\\n", 0)
        (True, False)

    """
    width, pos = indent_width(line, current_pos)
    if width > 3:
        return False
    mark = ""
    count = 0
    for char in line[pos:]:
        if char in _SPACE_CHARS:
            continue
        if not mark:
            if char not in "*-_":
                return False
            mark = char
        elif char != mark:
            return False
        count += 1
    return count > 2


def setext_bar_char(line: str) -> str | None:
    """Return ``=`` or ``-`` if the line is a setext heading underline."""
    stripped = line.lstrip(" ")
    if len(line) - len(stripped) > 3:
        return None
    body = stripped.rstrip()
    if body and body[0] in "=-" and body.count(body[0]) == len(body):
        return body[0]
    return None
