"""Block attributes.

Attributes attached to a block are a closed sum type. The renderer
matches on the variant, so there is no guessing about how a value is
stored.

- ClassList: CSS classes, emitted as one ``class`` attribute
- TypeSymbol: HTML ``type`` of an ordered list
- NumericValue: integer attribute such as ``start``
- Passthrough: any other ``name="value"`` pair, emitted verbatim

Attribute lines (enabled by the ``attributes`` plugin) look like::

    {#intro .wide .sbs data-x=1 title="Two words"}

Thread Safety:
    All attribute values are frozen dataclasses.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from fancylists.lists.types import ListType


@dataclass(frozen=True, slots=True)
class ClassList:
    """CSS class names in first-appearance order."""

    names: tuple[str, ...]

    @property
    def name(self) -> str:
        return "class"


@dataclass(frozen=True, slots=True)
class TypeSymbol:
    """Ordered list display type, emitted as ``type="a"`` etc."""

    list_type: ListType

    @property
    def name(self) -> str:
        return "type"


@dataclass(frozen=True, slots=True)
class NumericValue:
    name: str
    value: int


@dataclass(frozen=True, slots=True)
class Passthrough:
    name: str
    value: str


type Attribute = ClassList | TypeSymbol | NumericValue | Passthrough


_NAME = r"[A-Za-z_:][A-Za-z0-9_.:-]*"

_TOKEN_PATTERN = re.compile(
    r"""
    \#(?P<id>[^\s}#.]+)
    | \.(?P<cls>[^\s}#.]+)
    | (?P<key>""" + _NAME + r""")=(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<bare>[^\s"'=<>`}]+))
    """,
    re.VERBOSE,
)


def parse_attribute_line(text: str) -> tuple[Attribute, ...] | None:
    """Parse a whole-line ``{...}`` attribute block.

    Args:
        text: One source line, leading and trailing whitespace allowed

    Returns:
        The attributes in first-appearance order, or None if the line is
        not a well-formed attribute block

    Example:
        >>> parse_attribute_line('{.a #x .b k="v w"}')
        (ClassList(names=('a', 'b')), Passthrough(name='id', value='x'), Passthrough(name='k', value='v w'))

    """
    stripped = text.strip()
    if len(stripped) < 2 or stripped[0] != "{" or stripped[-1] != "}":
        return None
    body = stripped[1:-1]

    pos = 0
    length = len(body)
    attrs: list[Attribute] = []
    while True:
        while pos < length and body[pos] in " \t":
            pos += 1
        if pos >= length:
            break
        match = _TOKEN_PATTERN.match(body, pos)
        if match is None:
            return None
        end = match.end()
        if end < length and body[end] not in " \t":
            return None
        if match.group("id") is not None:
            attrs.append(Passthrough("id", match.group("id")))
        elif match.group("cls") is not None:
            attrs.append(ClassList((match.group("cls"),)))
        else:
            value = next(
                v for v in (match.group("dq"), match.group("sq"), match.group("bare")) if v is not None
            )
            attrs.append(Passthrough(match.group("key"), value))
        pos = end

    if not attrs:
        return None
    return merge_attributes((), attrs)


def merge_attributes(
    existing: Iterable[Attribute], new: Iterable[Attribute]
) -> tuple[Attribute, ...]:
    """Combine two attribute runs.

    Classes accumulate into a single ClassList kept at the position of the
    first class seen. For every other name the later value wins, at the
    position of the first occurrence.
    """
    merged: list[Attribute] = []
    positions: dict[str, int] = {}
    for attr in (*existing, *new):
        index = positions.get(attr.name)
        if index is None:
            positions[attr.name] = len(merged)
            merged.append(attr)
            continue
        current = merged[index]
        if isinstance(current, ClassList) and isinstance(attr, ClassList):
            names = current.names + tuple(n for n in attr.names if n not in current.names)
            merged[index] = ClassList(names)
        else:
            merged[index] = attr
    return tuple(merged)


def class_names(attrs: Iterable[Attribute]) -> tuple[str, ...]:
    """All class names in ``attrs``, in order."""
    names: list[str] = []
    for attr in attrs:
        if isinstance(attr, ClassList):
            names.extend(attr.names)
    return tuple(names)


__all__ = [
    "Attribute",
    "ClassList",
    "NumericValue",
    "Passthrough",
    "TypeSymbol",
    "class_names",
    "merge_attributes",
    "parse_attribute_line",
]
