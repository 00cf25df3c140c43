"""Tests for the LineReader cursor."""

from __future__ import annotations

from fancylists.parsing.reader import LineReader


class TestLineReader:
    """Peeking, advancing, and line bookkeeping."""

    def test_peek_first_line(self) -> None:
        reader = LineReader("one\ntwo\n")
        assert reader.lineno == 0
        assert reader.peek_line() == "one\n"

    def test_advance_line(self) -> None:
        reader = LineReader("one\ntwo")
        reader.advance_line()
        assert reader.lineno == 1
        assert reader.peek_line() == "two"
        reader.advance_line()
        assert reader.peek_line() is None

    def test_empty_source(self) -> None:
        assert LineReader("").peek_line() is None

    def test_advance_within_line(self) -> None:
        reader = LineReader("- item\n")
        reader.advance(2)
        assert reader.peek_line() == "item\n"
        assert reader.line_offset() == 2

    def test_advance_stops_at_newline(self) -> None:
        reader = LineReader("ab\ncd\n")
        reader.advance(10)
        assert reader.peek_line() == "\n"
        assert reader.lineno == 0

    def test_advance_to_eol(self) -> None:
        reader = LineReader("abc\nd\n")
        reader.advance_to_eol()
        assert reader.peek_line() == "\n"

    def test_line_offset_expands_tabs(self) -> None:
        reader = LineReader("a\tb\n")
        reader.advance(2)
        assert reader.peek_line() == "b\n"
        assert reader.line_offset() == 4


class TestPadding:
    """Partially consumed tabs leave virtual spaces behind."""

    def test_padding_is_prepended(self) -> None:
        reader = LineReader("-\tfoo\n")
        reader.advance_and_set_padding(2, 2)
        assert reader.padding == 2
        assert reader.peek_line() == "  foo\n"
        assert reader.line_offset() == 2

    def test_advance_consumes_padding_first(self) -> None:
        reader = LineReader("-\tfoo\n")
        reader.advance_and_set_padding(2, 2)
        reader.advance(1)
        assert reader.padding == 1
        assert reader.peek_line() == " foo\n"

    def test_next_line_clears_padding(self) -> None:
        reader = LineReader("-\tfoo\nbar\n")
        reader.advance_and_set_padding(2, 2)
        reader.advance_line()
        assert reader.padding == 0
        assert reader.peek_line() == "bar\n"


class TestSkipBlankLines:
    """Blank-line skipping reports what it skipped."""

    def test_skips_to_content(self) -> None:
        reader = LineReader("\n  \n\t\ntext\n")
        assert reader.skip_blank_lines() == (3, True)
        assert reader.peek_line() == "text\n"
        assert reader.lineno == 3

    def test_end_of_input(self) -> None:
        reader = LineReader("\n\n")
        assert reader.skip_blank_lines() == (2, False)

    def test_nothing_to_skip(self) -> None:
        reader = LineReader("text")
        assert reader.skip_blank_lines() == (0, True)
