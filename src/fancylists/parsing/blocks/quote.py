"""Block quote parser.

A ``>`` marker (plus one optional space) is consumed on every line the
quote continues; the rest of the line is offered to the quote's children.
A tab after ``>`` counts as one column of separator, the rest of the tab
becomes reader padding.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fancylists.parsing.protocols import State
from fancylists.parsing.tree import BlockNode, BlockQuoteNode
from fancylists.utils.text import indent_width, is_blank, tab_width

if TYPE_CHECKING:
    from fancylists.parsing.context import ParseContext
    from fancylists.parsing.reader import LineReader


def _consume_marker(reader: LineReader) -> bool:
    line = reader.peek_line()
    if line is None:
        return False
    width, pos = indent_width(line, reader.line_offset())
    if width > 3 or pos >= len(line) or line[pos] != ">":
        return False
    pos += 1
    reader.advance(pos)
    if pos >= len(line) or line[pos] == "\n":
        return True
    if line[pos] in " \t":
        padding = tab_width(reader.line_offset()) - 1 if line[pos] == "\t" else 0
        reader.advance_and_set_padding(1, padding)
    return True


class BlockQuoteParser:
    triggers = frozenset(">")
    can_interrupt_paragraph = True
    can_accept_indented_line = False

    def open(
        self, parent: BlockNode, reader: LineReader, pc: ParseContext
    ) -> tuple[BlockNode | None, State]:
        lineno = reader.lineno
        if _consume_marker(reader):
            return BlockQuoteNode(lineno=lineno), State.HAS_CHILDREN
        return None, State.NONE

    def continue_(self, node: BlockNode, reader: LineReader, pc: ParseContext) -> State:
        line = reader.peek_line()
        if line is None or is_blank(line) or not _consume_marker(reader):
            return State.CLOSE
        return State.CONTINUE | State.HAS_CHILDREN

    def close(self, node: BlockNode, reader: LineReader, pc: ParseContext) -> None:
        pass


__all__ = ["BlockQuoteParser"]
