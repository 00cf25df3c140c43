"""Indented and fenced code block parsers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fancylists.parsing.protocols import State
from fancylists.parsing.tree import BlockNode, CodeBlockNode, FencedCodeNode
from fancylists.utils.text import indent_position, indent_width, is_blank

if TYPE_CHECKING:
    from fancylists.parsing.context import ParseContext
    from fancylists.parsing.reader import LineReader

CODE_INDENT = 4
MIN_FENCE_LENGTH = 3


def _ensure_newline(line: str) -> str:
    return line if line.endswith("\n") else line + "\n"


class IndentedCodeParser:
    """Lines indented by 4+ columns that do not continue a paragraph."""

    triggers = None
    can_interrupt_paragraph = False
    can_accept_indented_line = True

    def open(
        self, parent: BlockNode, reader: LineReader, pc: ParseContext
    ) -> tuple[BlockNode | None, State]:
        line = reader.peek_line()
        if line is None or is_blank(line):
            return None, State.NONE
        pos, padding = indent_position(line, reader.line_offset(), CODE_INDENT)
        if pos < 0:
            return None, State.NONE
        node = CodeBlockNode(lineno=reader.lineno)
        reader.advance_and_set_padding(pos, padding)
        content = reader.peek_line()
        node.lines.append(_ensure_newline(content or ""))
        reader.advance(len(content or "") - 1)
        return node, State.NO_CHILDREN

    def continue_(self, node: BlockNode, reader: LineReader, pc: ParseContext) -> State:
        line = reader.peek_line()
        if line is None:
            return State.CLOSE
        if is_blank(line):
            pos, padding = indent_position(line, reader.line_offset(), CODE_INDENT)
            if pos < 0:
                node.lines.append("\n")
            else:
                node.lines.append(_ensure_newline(" " * padding + line[pos:]))
            reader.advance_to_eol()
            return State.CONTINUE | State.NO_CHILDREN
        pos, padding = indent_position(line, reader.line_offset(), CODE_INDENT)
        if pos < 0:
            return State.CLOSE
        reader.advance_and_set_padding(pos, padding)
        content = reader.peek_line() or ""
        node.lines.append(_ensure_newline(content))
        reader.advance(len(content) - 1)
        return State.CONTINUE | State.NO_CHILDREN

    def close(self, node: BlockNode, reader: LineReader, pc: ParseContext) -> None:
        """Drop trailing blank lines."""
        while node.lines and is_blank(node.lines[-1]):
            node.lines.pop()


class FencedCodeParser:
    """Code between ````` ``` ````` or ``~~~`` fences."""

    triggers = frozenset("`~")
    can_interrupt_paragraph = True
    can_accept_indented_line = False

    def open(
        self, parent: BlockNode, reader: LineReader, pc: ParseContext
    ) -> tuple[BlockNode | None, State]:
        line = reader.peek_line()
        pos = pc.block_offset
        if line is None or pos < 0:
            return None, State.NONE
        fence_char = line[pos]
        end = pos
        while end < len(line) and line[end] == fence_char:
            end += 1
        if end - pos < MIN_FENCE_LENGTH:
            return None, State.NONE
        info = line[end:].strip()
        if fence_char == "`" and "`" in info:
            return None, State.NONE
        node = FencedCodeNode(
            lineno=reader.lineno,
            fence_char=fence_char,
            fence_length=end - pos,
            fence_indent=pc.block_indent,
            info=info,
        )
        reader.advance(len(line) - 1)
        return node, State.NO_CHILDREN

    def continue_(self, node: BlockNode, reader: LineReader, pc: ParseContext) -> State:
        assert isinstance(node, FencedCodeNode)
        line = reader.peek_line()
        if line is None:
            return State.CLOSE
        width, pos = indent_width(line, reader.line_offset())
        if width < CODE_INDENT:
            end = pos
            while end < len(line) and line[end] == node.fence_char:
                end += 1
            if end - pos >= node.fence_length and is_blank(line[end:]):
                reader.advance_to_eol()
                return State.CLOSE

        pos, padding = indent_position(line, reader.line_offset(), node.fence_indent)
        if pos < 0:
            content = line.lstrip(" \t")
        else:
            content = " " * padding + line[pos:]
        node.lines.append(_ensure_newline(content))
        reader.advance_to_eol()
        return State.CONTINUE | State.NO_CHILDREN

    def close(self, node: BlockNode, reader: LineReader, pc: ParseContext) -> None:
        pass


__all__ = ["CODE_INDENT", "FencedCodeParser", "IndentedCodeParser"]
