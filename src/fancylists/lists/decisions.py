"""List open/continue decisions and item materialization.

Pure functions over one scanned line plus a small snapshot of list state.
The block parsers in fancylists.parsing.blocks.lists own the tree and the
reader; everything they need to decide lives here.

Thread Safety:
    All functions are pure; ListState and ListOpening are immutable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fancylists.lists.classifier import (
    CONTINUATION_TOKEN,
    continuation_type,
    type_of_fancy_marker,
)
from fancylists.lists.scanner import parse_start, scan_marker
from fancylists.lists.trace import trace
from fancylists.lists.types import ListType, MarkerKind, ScanResult
from fancylists.parsing.tree import BlockNode, ListNode, NodeKind, TextBlockNode
from fancylists.utils.text import indent_width, is_blank, is_thematic_break, setext_bar_char

# Content indented further than this after a marker is an indented code
# block inside the item, not the item's first paragraph.
MAX_CONTENT_INDENT = 4


class ListAction(Enum):
    """Outcome of checking one line against an open list."""

    CONTINUE = "continue"
    CLOSE = "close"


@dataclass(frozen=True, slots=True)
class ListOpening:
    """A list the current line may open.

    Attributes:
        marker: Bullet character, or ``.``/``)`` for ordered lists
        start: Value of the first item (None for bullet lists)
        list_type: Display type (None for bullets and for ``#.`` starts)

    """

    marker: str
    start: int | None
    list_type: ListType | None

    @property
    def ordered(self) -> bool:
        return self.start is not None


@dataclass(frozen=True, slots=True)
class ListState:
    """What decide_continue needs to know about an open list.

    Attributes:
        marker: Bullet character or ordered delimiter the list opened with
        ordered: True for ordered lists
        list_type: Current display type (None for bullets and ``#.`` starts)
        item_offset: Content column of the most recent item
        item_empty: The most recent item has no children yet

    """

    marker: str
    ordered: bool
    list_type: ListType | None
    item_offset: int
    item_empty: bool


def decide_open(
    line: str,
    result: ScanResult,
    *,
    interrupts_paragraph: bool,
    in_list_item: bool,
) -> ListOpening | None:
    """Decide whether a line opens a new list.

    Args:
        line: The candidate line
        result: Strict-mode scan of ``line``
        interrupts_paragraph: The last open block is a paragraph with the
            same parent as the candidate list
        in_list_item: The candidate list would be nested in a list item

    Returns:
        ListOpening, or None if the line cannot open a list here

    """
    if result.kind is MarkerKind.NONE:
        return None

    marker = result.delimiter(line)
    start: int | None = None
    list_type: ListType | None = None

    if result.kind is MarkerKind.ORDERED_PLAIN:
        start = parse_start(line, result)
        list_type = ListType.NUM
    elif result.kind is MarkerKind.ORDERED_FANCY:
        list_type, start = type_of_fancy_marker(result.token(line))
        if start == 0:
            trace("open_rejected", token=result.token(line), reason="invalid marker")
            return None

    if interrupts_paragraph:
        if result.kind.is_ordered and start != 1 and not in_list_item:
            trace("open_rejected", start=start, reason="interrupts paragraph")
            return None
        if not result.has_content or is_blank(result.content(line)):
            trace("open_rejected", reason="empty item interrupts paragraph")
            return None

    trace("list_open", marker=marker, start=start, list_type=list_type)
    return ListOpening(marker=marker, start=start, list_type=list_type)


def can_continue(line: str, result: ScanResult, state: ListState) -> bool:
    """Check that a marker belongs to the same family as an open list.

    Bullet lists need the identical bullet character. Ordered lists take any
    ordered marker with either delimiter.
    """
    if result.kind is MarkerKind.BULLET:
        return not state.ordered and result.delimiter(line) == state.marker
    return result.kind.is_ordered and state.ordered


def decide_continue(
    line: str,
    indent: int,
    state: ListState,
    *,
    pending_blank: bool = False,
    after_paragraph: bool = False,
) -> ListAction:
    """Decide whether a line keeps an open list alive.

    Closing never consumes the line: the engine offers it to the list
    openers again, which is how a type change starts a sibling list.

    Args:
        line: The line, as seen at the list's container position
        indent: Indent width of ``line`` in columns
        state: Snapshot of the open list
        pending_blank: The last item was empty when a blank line was seen
        after_paragraph: The innermost open block is a paragraph, so a
            ``---`` line may underline it instead of breaking the list

    """
    if is_blank(line):
        return ListAction.CONTINUE

    offset = state.item_offset
    if indent < offset or state.item_empty:
        if indent < MAX_CONTENT_INDENT:
            result = scan_marker(line)
            if result.is_marker and result.indent - offset < MAX_CONTENT_INDENT:
                if not can_continue(line, result, state):
                    trace("list_close", reason="marker family changed", marker=result.delimiter(line))
                    return ListAction.CLOSE
                rest = line[result.marker_stop - 1 :]
                if is_thematic_break(rest, 0) and not (after_paragraph and setext_bar_char(rest) == "-"):
                    trace("list_close", reason="thematic break")
                    return ListAction.CLOSE
                token = result.token(line)
                if state.ordered and token != CONTINUATION_TOKEN:
                    current = state.list_type or ListType.NUM
                    expected = continuation_type(token, current)
                    if expected is not current:
                        trace("list_close", reason="type changed", current=current, expected=expected)
                        return ListAction.CLOSE
                return ListAction.CONTINUE
        if not state.item_empty:
            return ListAction.CLOSE

    if state.item_empty and indent < offset:
        return ListAction.CLOSE
    if pending_blank:
        trace("list_close", reason="empty item followed by blank lines")
        return ListAction.CLOSE
    return ListAction.CONTINUE


def item_value(start: int | None, child_count: int) -> int | None:
    """Value of the next item: ``start`` plus the items already in the list."""
    if start is None:
        return None
    return start + child_count


def content_offset(line: str, result: ScanResult) -> int:
    """Columns between the end of the marker and the item's content."""
    if not result.has_content or is_blank(result.content(line)):
        return 1
    width, _ = indent_width(line[result.content_start :], result.content_start)
    if width > MAX_CONTENT_INDENT:
        return 1
    return width


def _has_blank_before(node: BlockNode) -> bool:
    return node.blank_previous_lines


def finalize_tightness(list_node: ListNode) -> bool:
    """Compute whether a closed list is tight, flattening it if so.

    A list is loose if any item after the first follows a blank line, or if
    a block after the first one inside an item follows a blank line. In a
    tight list every paragraph directly inside an item becomes a text
    block carrying the same lines.

    Returns:
        The final value of ``list_node.is_tight``

    """
    items = list_node.children
    for index, item in enumerate(items):
        if index > 0 and _has_blank_before(item):
            list_node.is_tight = False
            break
        if any(_has_blank_before(block) for block in item.children[1:]):
            list_node.is_tight = False
            break

    if list_node.is_tight:
        for item in items:
            for child in list(item.children):
                if child.kind is NodeKind.PARAGRAPH:
                    text_block = TextBlockNode(lineno=child.lineno, lines=child.lines)
                    item.replace_child(child, text_block)

    trace("list_finalized", items=len(items), tight=list_node.is_tight)
    return list_node.is_tight


__all__ = [
    "ListAction",
    "ListOpening",
    "ListState",
    "can_continue",
    "content_offset",
    "decide_continue",
    "decide_open",
    "finalize_tightness",
    "item_value",
]
