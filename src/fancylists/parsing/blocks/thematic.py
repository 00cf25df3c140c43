"""Thematic break (``---``, ``***``, ``___``) parser."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fancylists.parsing.protocols import State
from fancylists.parsing.tree import BlockNode, ThematicBreakNode
from fancylists.utils.text import is_thematic_break

if TYPE_CHECKING:
    from fancylists.parsing.context import ParseContext
    from fancylists.parsing.reader import LineReader


class ThematicBreakParser:
    triggers = frozenset("-*_")
    can_interrupt_paragraph = True
    can_accept_indented_line = False

    def open(
        self, parent: BlockNode, reader: LineReader, pc: ParseContext
    ) -> tuple[BlockNode | None, State]:
        line = reader.peek_line()
        if line is None or not is_thematic_break(line, reader.line_offset()):
            return None, State.NONE
        reader.advance(len(line) - 1)
        return ThematicBreakNode(lineno=reader.lineno), State.NO_CHILDREN

    def continue_(self, node: BlockNode, reader: LineReader, pc: ParseContext) -> State:
        return State.CLOSE

    def close(self, node: BlockNode, reader: LineReader, pc: ParseContext) -> None:
        pass


__all__ = ["ThematicBreakParser"]
