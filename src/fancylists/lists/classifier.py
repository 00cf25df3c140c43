"""Marker classification: numeric values and display types.

Alphabetic markers use bijective base-26 (a=1 ... z=26, aa=27). Roman
numerals are only recognized when the token starts with ``i``/``I``; any
other roman-looking token (``v``, ``vi``, ``x``, ``c``) is alphabetic.

The one place classification depends on list state is a bare ``i``/``I``
continuing a list: see continuation_type().
"""

from __future__ import annotations

import re

from fancylists.lists.scanner import is_ascii_letter
from fancylists.lists.types import ListType

CONTINUATION_TOKEN = "#"

_ROMAN_PATTERN = re.compile(r"M{0,3}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})")

_ROMAN_VALUES: dict[str, int] = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}


def alpha_value(token: str) -> int:
    """Ordinal of an alphabetic marker, case-insensitive.

    Returns:
        1 for ``a``, 26 for ``z``, 27 for ``aa``; 0 if the token is empty or
        contains anything but ASCII letters

    Example:
        >>> alpha_value("vi")
        581

    """
    if not token:
        return 0
    result = 0
    for char in token.lower():
        if not "a" <= char <= "z":
            return 0
        result = result * 26 + (ord(char) - ord("a") + 1)
    return result


def roman_value(token: str) -> int | None:
    """Value of a roman-numeral marker that starts with ``i``/``I``.

    Returns:
        The decoded value, or None if the token does not start with
        ``i``/``I`` or is not a well-formed numeral

    Example:
        >>> roman_value("iv"), roman_value("vi"), roman_value("iiii")
        (4, None, None)

    """
    if not token or token[0].lower() != "i":
        return None
    numeral = token.upper()
    if _ROMAN_PATTERN.fullmatch(numeral) is None:
        return None
    total = 0
    previous = 0
    for char in reversed(numeral):
        value = _ROMAN_VALUES[char]
        if value < previous:
            total -= value
        else:
            total += value
            previous = value
    return total


def type_of_fancy_marker(token: str) -> tuple[ListType | None, int]:
    """Display type and numeric value of a fancy marker token.

    Returns:
        ``(None, 1)`` for the ``#`` continuation marker (type comes from
        context); ``(type, value)`` otherwise, where a value of 0 means the
        token is not a valid marker

    Example:
        >>> type_of_fancy_marker("ii")
        (<ListType.LC_ROMAN: 'i'>, 2)
        >>> type_of_fancy_marker("C")
        (<ListType.UC_ALPHA: 'A'>, 3)

    """
    if token == CONTINUATION_TOKEN:
        return None, 1
    if not token:
        return ListType.NUM, 0
    lower = token[0].islower()
    value = roman_value(token)
    if value is not None:
        return (ListType.LC_ROMAN if lower else ListType.UC_ROMAN), value
    return (ListType.LC_ALPHA if lower else ListType.UC_ALPHA), alpha_value(token)


def marker_type(token: str) -> tuple[ListType | None, int]:
    """Type and value of any ordered marker token, digits included."""
    if token and not is_ascii_letter(token[0]) and token != CONTINUATION_TOKEN:
        return ListType.NUM, int(token)
    return type_of_fancy_marker(token)


def continuation_type(token: str, current: ListType) -> ListType:
    """Type a marker would give the list it is about to continue.

    A bare ``i`` continuing a lowercase alphabetic list (or ``I`` continuing
    an uppercase one) is just the next letter. Anywhere else a bare
    ``i``/``I`` signals a roman-numeral list.

    Args:
        token: Marker token other than ``#``
        current: Type of the list being continued

    Example:
        >>> continuation_type("i", ListType.LC_ALPHA)
        <ListType.LC_ALPHA: 'a'>
        >>> continuation_type("i", ListType.NUM)
        <ListType.LC_ROMAN: 'i'>

    """
    if token == "i":
        return current if current is ListType.LC_ALPHA else ListType.LC_ROMAN
    if token == "I":
        return current if current is ListType.UC_ALPHA else ListType.UC_ROMAN
    list_type, _ = marker_type(token)
    return list_type if list_type is not None else current


__all__ = [
    "CONTINUATION_TOKEN",
    "alpha_value",
    "roman_value",
    "type_of_fancy_marker",
    "marker_type",
    "continuation_type",
]
