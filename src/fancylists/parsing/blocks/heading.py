"""ATX (``# Title``) and setext (``Title\\n=====``) heading parsers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fancylists.parsing.protocols import State
from fancylists.parsing.tree import BlockNode, HeadingNode, NodeKind
from fancylists.utils.text import setext_bar_char

if TYPE_CHECKING:
    from fancylists.parsing.context import ParseContext
    from fancylists.parsing.reader import LineReader

MAX_HEADING_LEVEL = 6


def _strip_closing_sequence(text: str) -> str:
    """Remove an optional closing run of ``#`` from heading content."""
    content = text.strip()
    stripped = content.rstrip("#")
    if stripped == content:
        return content
    if not stripped:
        return ""
    if stripped[-1] in " \t":
        return stripped.rstrip()
    return content


class ATXHeadingParser:
    triggers = frozenset("#")
    can_interrupt_paragraph = True
    can_accept_indented_line = False

    def open(
        self, parent: BlockNode, reader: LineReader, pc: ParseContext
    ) -> tuple[BlockNode | None, State]:
        line = reader.peek_line()
        pos = pc.block_offset
        if line is None or pos < 0:
            return None, State.NONE
        end = pos
        while end < len(line) and line[end] == "#":
            end += 1
        level = end - pos
        if level == 0 or level > MAX_HEADING_LEVEL:
            return None, State.NONE
        if end < len(line) and line[end] not in " \t\n":
            return None, State.NONE
        node = HeadingNode(lineno=reader.lineno, level=level)
        content = _strip_closing_sequence(line[end:])
        if content:
            node.lines.append(content)
        reader.advance(len(line) - 1)
        return node, State.NO_CHILDREN

    def continue_(self, node: BlockNode, reader: LineReader, pc: ParseContext) -> State:
        return State.CLOSE

    def close(self, node: BlockNode, reader: LineReader, pc: ParseContext) -> None:
        pass


class SetextHeadingParser:
    """Turns the open paragraph into a heading when a ``===``/``---`` bar follows.

    The heading is opened with REQUIRE_PARAGRAPH so the engine closes the
    paragraph first; the paragraph's lines move to the heading at close.
    """

    triggers = frozenset("-=")
    can_interrupt_paragraph = True
    can_accept_indented_line = False

    def open(
        self, parent: BlockNode, reader: LineReader, pc: ParseContext
    ) -> tuple[BlockNode | None, State]:
        last = pc.last_opened_block()
        if last is None or last.node.kind is not NodeKind.PARAGRAPH or last.node.parent is not parent:
            return None, State.NONE
        line = reader.peek_line()
        char = setext_bar_char(line) if line is not None else None
        if char is None:
            return None, State.NONE
        pc.setext_paragraph = last.node
        node = HeadingNode(lineno=last.node.lineno, level=1 if char == "=" else 2)
        reader.advance(len(line) - 1)
        return node, State.NO_CHILDREN | State.REQUIRE_PARAGRAPH

    def continue_(self, node: BlockNode, reader: LineReader, pc: ParseContext) -> State:
        return State.CLOSE

    def close(self, node: BlockNode, reader: LineReader, pc: ParseContext) -> None:
        paragraph = pc.setext_paragraph
        pc.setext_paragraph = None
        if paragraph is None:
            return
        node.lines = paragraph.lines
        node.blank_previous_lines = paragraph.blank_previous_lines
        if paragraph.parent is not None:
            paragraph.parent.remove_child(paragraph)


__all__ = ["ATXHeadingParser", "MAX_HEADING_LEVEL", "SetextHeadingParser"]
