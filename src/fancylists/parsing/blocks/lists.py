"""List and list item block parsers.

These parsers own the tree and the reader; the rules for opening,
continuing, and numbering live in fancylists.lists.decisions.

The two scratch flags on ParseContext coordinate them:

- ``empty_item_with_blank_lines``: set when a blank line follows an empty
  item, so the next content line cannot reopen that item
- ``skip_list_open``: set when an item closes because the line starts a
  sibling item, so the list parser steps aside and the item parser opens it

Both flags are cleared whenever a list or item opens.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fancylists.lists.decisions import (
    ListAction,
    ListState,
    content_offset,
    decide_continue,
    decide_open,
    finalize_tightness,
    item_value,
)
from fancylists.lists.scanner import scan_marker
from fancylists.lists.trace import trace
from fancylists.parsing.protocols import State
from fancylists.parsing.tree import BlockNode, ListItemNode, ListNode, NodeKind
from fancylists.utils.text import indent_position, indent_width, is_blank

if TYPE_CHECKING:
    from fancylists.parsing.context import ParseContext
    from fancylists.parsing.reader import LineReader

LIST_TRIGGERS = frozenset("-+*#0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")


def _last_item_offset(list_node: BlockNode) -> int:
    last = list_node.last_child
    if isinstance(last, ListItemNode):
        return last.offset
    return 0


class FancyListParser:
    """Opens and continues list containers (bullet, numeric, and fancy)."""

    triggers = LIST_TRIGGERS
    can_interrupt_paragraph = True
    can_accept_indented_line = False

    def open(
        self, parent: BlockNode, reader: LineReader, pc: ParseContext
    ) -> tuple[BlockNode | None, State]:
        last_block = pc.last_opened_block()
        last = last_block.node if last_block is not None else None
        if isinstance(last, ListNode) or pc.skip_list_open:
            pc.skip_list_open = False
            return None, State.NONE

        line = reader.peek_line()
        if line is None:
            return None, State.NONE
        result = scan_marker(line, strict=True)
        opening = decide_open(
            line,
            result,
            interrupts_paragraph=(
                last is not None and last.kind is NodeKind.PARAGRAPH and last.parent is parent
            ),
            in_list_item=parent.kind is NodeKind.LIST_ITEM,
        )
        if opening is None:
            return None, State.NONE

        node = ListNode(
            lineno=reader.lineno,
            marker=opening.marker,
            start=opening.start,
            list_type=opening.list_type,
        )
        pc.empty_item_with_blank_lines = False
        return node, State.HAS_CHILDREN

    def continue_(self, node: BlockNode, reader: LineReader, pc: ParseContext) -> State:
        assert isinstance(node, ListNode)
        line = reader.peek_line()
        if line is None:
            return State.CLOSE

        last_item = node.last_child
        item_empty = last_item is None or last_item.child_count == 0
        if is_blank(line):
            if item_empty:
                pc.empty_item_with_blank_lines = True
            return State.CONTINUE | State.HAS_CHILDREN

        last_block = pc.last_opened_block()
        state = ListState(
            marker=node.marker,
            ordered=node.ordered,
            list_type=node.list_type,
            item_offset=_last_item_offset(node),
            item_empty=item_empty,
        )
        indent, _ = indent_width(line, reader.line_offset())
        action = decide_continue(
            line,
            indent,
            state,
            pending_blank=pc.empty_item_with_blank_lines,
            after_paragraph=last_block is not None and last_block.node.kind is NodeKind.PARAGRAPH,
        )
        if action is ListAction.CLOSE:
            return State.CLOSE
        return State.CONTINUE | State.HAS_CHILDREN

    def close(self, node: BlockNode, reader: LineReader, pc: ParseContext) -> None:
        assert isinstance(node, ListNode)
        finalize_tightness(node)


class FancyListItemParser:
    """Opens list items inside an open list and keeps them going."""

    triggers = LIST_TRIGGERS
    can_interrupt_paragraph = True
    can_accept_indented_line = False

    def open(
        self, parent: BlockNode, reader: LineReader, pc: ParseContext
    ) -> tuple[BlockNode | None, State]:
        if not isinstance(parent, ListNode):
            return None, State.NONE
        line = reader.peek_line()
        if line is None:
            return None, State.NONE
        result = scan_marker(line)
        if not result.is_marker:
            return None, State.NONE
        if result.indent - _last_item_offset(parent) > 3:
            return None, State.NONE

        pc.empty_item_with_blank_lines = False
        offset = content_offset(line, result)
        node = ListItemNode(
            lineno=reader.lineno,
            offset=result.marker_stop + offset,
            value=item_value(parent.start, parent.child_count),
        )
        trace("item_open", token=result.token(line), value=node.value, offset=node.offset)
        if not result.has_content or is_blank(result.content(line)):
            return node, State.NO_CHILDREN

        pos, padding = indent_position(line[result.content_start :], result.content_start, offset)
        reader.advance_and_set_padding(result.marker_stop + pos, padding)
        return node, State.HAS_CHILDREN

    def continue_(self, node: BlockNode, reader: LineReader, pc: ParseContext) -> State:
        assert isinstance(node, ListItemNode)
        line = reader.peek_line()
        if line is None:
            return State.CLOSE
        if is_blank(line):
            reader.advance_to_eol()
            return State.CONTINUE | State.HAS_CHILDREN

        offset = _last_item_offset(node.parent) if node.parent is not None else node.offset
        is_empty = node.child_count == 0 and pc.empty_item_with_blank_lines
        indent, _ = indent_width(line, reader.line_offset())
        if (is_empty or indent < offset) and indent < 4:
            if scan_marker(line, strict=True).is_marker:
                pc.skip_list_open = True
                return State.CLOSE
            if not is_empty:
                return State.CLOSE

        pos, padding = indent_position(line, reader.line_offset(), offset)
        if pos >= 0:
            reader.advance_and_set_padding(pos, padding)
        return State.CONTINUE | State.HAS_CHILDREN

    def close(self, node: BlockNode, reader: LineReader, pc: ParseContext) -> None:
        pass


__all__ = ["FancyListItemParser", "FancyListParser", "LIST_TRIGGERS"]
