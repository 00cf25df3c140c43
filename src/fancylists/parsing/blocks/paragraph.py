"""Paragraph block parser.

Paragraphs are the fallback: tried on every line, last. Lines that no other
parser claims while a paragraph is open are appended to it (lazy
continuation).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fancylists.parsing.protocols import State
from fancylists.parsing.tree import BlockNode, ParagraphNode
from fancylists.utils.text import is_blank

if TYPE_CHECKING:
    from fancylists.parsing.context import ParseContext
    from fancylists.parsing.reader import LineReader


class ParagraphParser:
    triggers = None
    can_interrupt_paragraph = False
    can_accept_indented_line = False

    def open(
        self, parent: BlockNode, reader: LineReader, pc: ParseContext
    ) -> tuple[BlockNode | None, State]:
        line = reader.peek_line()
        if line is None or is_blank(line):
            return None, State.NONE
        node = ParagraphNode(lineno=reader.lineno, lines=[line.lstrip(" \t")])
        reader.advance(len(line) - 1)
        return node, State.NO_CHILDREN

    def continue_(self, node: BlockNode, reader: LineReader, pc: ParseContext) -> State:
        line = reader.peek_line()
        if line is None or is_blank(line):
            return State.CLOSE
        node.lines.append(line)
        reader.advance(len(line) - 1)
        return State.CONTINUE | State.NO_CHILDREN

    def close(self, node: BlockNode, reader: LineReader, pc: ParseContext) -> None:
        """Trim surrounding whitespace; drop the paragraph if nothing is left."""
        lines = [line.lstrip(" \t") for line in node.lines]
        if lines:
            lines[-1] = lines[-1].rstrip()
        node.lines = [line for line in lines if line]
        if not node.lines and node.parent is not None:
            node.parent.remove_child(node)


__all__ = ["ParagraphParser"]
