"""Block attribute lines (``{.class #id key=value}``).

An attribute line is parsed into a placeholder block. After the whole
document is parsed, attach_attribute_blocks() moves each placeholder's
attributes onto the block right before it and removes the placeholder.

Only active when ParseConfig.attributes_enabled is set (the
``attributes`` plugin).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fancylists.attributes import merge_attributes, parse_attribute_line
from fancylists.parsing.protocols import State
from fancylists.parsing.tree import AttributesNode, BlockNode, NodeKind
from fancylists.utils.logger import get_logger

if TYPE_CHECKING:
    from fancylists.parsing.context import ParseContext
    from fancylists.parsing.reader import LineReader

logger = get_logger(__name__)


class BlockAttributesParser:
    triggers = frozenset("{")
    can_interrupt_paragraph = True
    can_accept_indented_line = False

    def open(
        self, parent: BlockNode, reader: LineReader, pc: ParseContext
    ) -> tuple[BlockNode | None, State]:
        line = reader.peek_line()
        if line is None:
            return None, State.NONE
        attrs = parse_attribute_line(line)
        if attrs is None:
            return None, State.NONE
        reader.advance(len(line) - 1)
        return AttributesNode(lineno=reader.lineno, attributes=list(attrs)), State.NO_CHILDREN

    def continue_(self, node: BlockNode, reader: LineReader, pc: ParseContext) -> State:
        return State.CLOSE

    def close(self, node: BlockNode, reader: LineReader, pc: ParseContext) -> None:
        pass


def attach_attribute_blocks(root: BlockNode) -> None:
    """Attach every attribute placeholder to its preceding sibling.

    A placeholder with no preceding sibling is dropped.
    """
    for child in list(root.children):
        if child.kind is NodeKind.ATTRIBUTES:
            target = child.previous_sibling()
            root.remove_child(child)
            if target is None:
                logger.debug("Dropping attribute line %d: no preceding block", child.lineno + 1)
                continue
            target.attributes = list(merge_attributes(target.attributes, child.attributes))
        else:
            attach_attribute_blocks(child)


__all__ = ["BlockAttributesParser", "attach_attribute_blocks"]
