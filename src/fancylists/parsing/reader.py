"""Line cursor over the source text.

The reader exposes the current line from the cursor position on, and lets
block parsers consume it piecewise. When a parser consumes part of a tab,
the leftover columns become *padding*: virtual spaces that peek_line()
prepends to the rest of the line, so every index into a peeked line maps
one-to-one onto advance() units.

Thread Safety:
    A reader belongs to one parse and is not shared.
"""

from __future__ import annotations

from fancylists.utils.text import is_blank, tab_width


class LineReader:
    """Cursor over lines of a source string.

    Example:
        >>> reader = LineReader("- a\\n- b\\n")
        >>> reader.peek_line()
        '- a\\n'
        >>> reader.advance(2)
        >>> reader.peek_line(), reader.line_offset()
        ('a\\n', 2)

    """

    __slots__ = (
        "_source",
        "_length",
        "_lineno",
        "_line_start",
        "_start",
        "_stop",
        "_padding",
        "_peeked",
        "_line_offset",
    )

    def __init__(self, source: str) -> None:
        self._source = source
        self._length = len(source)
        self._lineno = -1
        self._line_start = 0
        self._start = 0
        self._stop = 0
        self._padding = 0
        self._peeked: str | None = None
        self._line_offset = -1
        self.advance_line()

    @property
    def lineno(self) -> int:
        """0-based number of the current line."""
        return self._lineno

    @property
    def padding(self) -> int:
        return self._padding

    def peek_line(self) -> str | None:
        """Rest of the current line, padding included, or None at the end."""
        if self._start >= self._length:
            return None
        if self._peeked is None:
            self._peeked = " " * self._padding + self._source[self._start : self._stop]
        return self._peeked

    def line_offset(self) -> int:
        """Column of the cursor within the current line, tabs expanded."""
        if self._line_offset < 0:
            column = 0
            for index in range(self._line_start, self._start):
                if self._source[index] == "\t":
                    column += tab_width(column)
                else:
                    column += 1
            self._line_offset = column - self._padding
        return self._line_offset

    def advance(self, n: int) -> None:
        """Consume ``n`` units of the current line, padding first."""
        self._line_offset = -1
        self._peeked = None
        while n > 0 and self._start < self._length:
            if self._padding:
                self._padding -= 1
            elif self._source[self._start] == "\n":
                break
            else:
                self._start += 1
            n -= 1

    def advance_and_set_padding(self, n: int, padding: int) -> None:
        self.advance(n)
        if padding > self._padding:
            self._padding = padding
            self._peeked = None
            self._line_offset = -1

    def advance_line(self) -> None:
        """Move to the start of the next line."""
        self._line_offset = -1
        self._peeked = None
        self._padding = 0
        self._start = self._stop
        self._line_start = self._start
        newline = self._source.find("\n", self._start)
        self._stop = self._length if newline == -1 else newline + 1
        self._lineno += 1

    def advance_to_eol(self) -> None:
        """Consume the current line up to, not including, its newline."""
        if self._start >= self._length:
            return
        self._line_offset = -1
        self._peeked = None
        self._padding = 0
        newline = self._source.find("\n", self._start, self._stop)
        self._start = self._stop if newline == -1 else newline

    def skip_blank_lines(self) -> tuple[int, bool]:
        """Skip blank lines.

        Returns:
            Tuple of (lines skipped, whether a non-blank line follows)

        """
        lines = 0
        while True:
            line = self.peek_line()
            if line is None:
                return lines, False
            if not is_blank(line):
                return lines, True
            lines += 1
            self.advance_line()


__all__ = ["LineReader"]
