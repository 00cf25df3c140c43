"""Type definitions for fancy list parsing.

MarkerKind is the coarse classification produced by the scanner; ListType is
the display type of an ordered list and the single source of truth for its
HTML ``type`` attribute, its CSS class, and the "did the type change" check.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MarkerKind(Enum):
    """Coarse kind of a scanned list marker."""

    BULLET = "bullet"
    ORDERED_PLAIN = "ordered-plain"  # digits only
    ORDERED_FANCY = "ordered-fancy"  # letters, roman numerals, or '#'
    NONE = "none"

    @property
    def is_ordered(self) -> bool:
        return self is MarkerKind.ORDERED_PLAIN or self is MarkerKind.ORDERED_FANCY


class ListType(Enum):
    """Display type of an ordered list.

    The value is the HTML ``type`` attribute symbol.
    """

    NUM = "1"
    LC_ALPHA = "a"
    UC_ALPHA = "A"
    LC_ROMAN = "i"
    UC_ROMAN = "I"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def css_class(self) -> str:
        return _CSS_CLASSES[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> ListType:
        """Look up a type by its ``type`` attribute symbol.

        Raises:
            ValueError: If the symbol is not one of 1, a, A, i, I

        """
        return cls(symbol)


_CSS_CLASSES: dict[ListType, str] = {
    ListType.NUM: "fl-num",
    ListType.LC_ALPHA: "fl-lcalpha",
    ListType.UC_ALPHA: "fl-ucalpha",
    ListType.LC_ROMAN: "fl-lcroman",
    ListType.UC_ROMAN: "fl-ucroman",
}


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Marker boundaries found on one line.

    All positions are indexes into the scanned line.

    Attributes:
        kind: Coarse marker kind (NONE when the line is not a list item)
        indent: Number of leading spaces before the marker (0-3)
        marker_start: Start of the marker token
        marker_end: End of the marker token, delimiter excluded
        marker_stop: Index just past the whole marker, delimiter included
        content_start: Index just past the marker, or -1 at end of input
        content_end: End of content with one trailing newline trimmed, or -1

    """

    kind: MarkerKind
    indent: int = 0
    marker_start: int = 0
    marker_end: int = 0
    marker_stop: int = 0
    content_start: int = -1
    content_end: int = -1

    @property
    def is_marker(self) -> bool:
        return self.kind is not MarkerKind.NONE

    @property
    def has_content(self) -> bool:
        """True when the line continues past the marker."""
        return self.content_start >= 0

    def token(self, line: str) -> str:
        """The marker token, e.g. ``"iv"`` for ``iv.`` or ``"-"`` for a bullet."""
        return line[self.marker_start : self.marker_end]

    def delimiter(self, line: str) -> str:
        """Last marker character: the bullet for bullets, ``.``/``)`` otherwise."""
        return line[self.marker_stop - 1]

    def content(self, line: str) -> str:
        """Text after the marker (may be empty or whitespace only)."""
        if self.content_start < 0:
            return ""
        return line[self.content_start : self.content_end]


NO_MARKER = ScanResult(kind=MarkerKind.NONE)
