"""Mutable block tree built by the block engine.

The engine opens, extends, and closes these nodes line by line. Once the
whole document is parsed, fancylists.parsing.freeze converts the tree into
the immutable AST in fancylists.nodes.

Node Hierarchy:
BlockNode (base)
├── DocumentNode
├── ParagraphNode
├── TextBlockNode (paragraph flattened by a tight list)
├── HeadingNode
├── ThematicBreakNode
├── CodeBlockNode (indented)
├── FencedCodeNode
├── BlockQuoteNode
├── ListNode
├── ListItemNode
└── AttributesNode (pending ``{...}`` line, removed after parsing)

Thread Safety:
    A tree belongs to exactly one parse and is never shared.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar

from fancylists.attributes import Attribute
from fancylists.lists.types import ListType


class NodeKind(Enum):
    """Kinds of block nodes in the mutable tree."""

    DOCUMENT = auto()
    PARAGRAPH = auto()
    TEXT_BLOCK = auto()
    HEADING = auto()
    THEMATIC_BREAK = auto()
    CODE_BLOCK = auto()
    FENCED_CODE = auto()
    BLOCK_QUOTE = auto()
    LIST = auto()
    LIST_ITEM = auto()
    ATTRIBUTES = auto()


@dataclass(slots=True, eq=False)
class BlockNode:
    """A block in the tree under construction.

    Nodes compare by identity; a node is in at most one parent.

    Attributes:
        lineno: 0-based line on which the block opened
        lines: Raw source lines owned by leaf blocks
        blank_previous_lines: A blank line preceded this block
        attributes: User attributes attached by the attributes plugin
        parent: Containing node, None for the root or a detached node
        children: Child blocks in document order

    """

    kind: ClassVar[NodeKind]

    lineno: int = 0
    lines: list[str] = field(default_factory=list)
    blank_previous_lines: bool = False
    attributes: list[Attribute] = field(default_factory=list)
    parent: BlockNode | None = field(default=None, repr=False)
    children: list[BlockNode] = field(default_factory=list, repr=False)

    @property
    def first_child(self) -> BlockNode | None:
        return self.children[0] if self.children else None

    @property
    def last_child(self) -> BlockNode | None:
        return self.children[-1] if self.children else None

    @property
    def child_count(self) -> int:
        return len(self.children)

    def previous_sibling(self) -> BlockNode | None:
        if self.parent is None:
            return None
        siblings = self.parent.children
        index = siblings.index(self)
        return siblings[index - 1] if index > 0 else None

    def next_sibling(self) -> BlockNode | None:
        if self.parent is None:
            return None
        siblings = self.parent.children
        index = siblings.index(self)
        return siblings[index + 1] if index + 1 < len(siblings) else None

    def append_child(self, child: BlockNode) -> None:
        """Append ``child``, detaching it from any previous parent."""
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.append(child)

    def remove_child(self, child: BlockNode) -> None:
        self.children.remove(child)
        child.parent = None

    def replace_child(self, old: BlockNode, new: BlockNode) -> None:
        """Put ``new`` where ``old`` was and detach ``old``."""
        index = self.children.index(old)
        if new.parent is not None:
            new.parent.remove_child(new)
        self.children[index] = new
        new.parent = self
        old.parent = None


@dataclass(slots=True, eq=False)
class DocumentNode(BlockNode):
    kind: ClassVar[NodeKind] = NodeKind.DOCUMENT


@dataclass(slots=True, eq=False)
class ParagraphNode(BlockNode):
    kind: ClassVar[NodeKind] = NodeKind.PARAGRAPH


@dataclass(slots=True, eq=False)
class TextBlockNode(BlockNode):
    kind: ClassVar[NodeKind] = NodeKind.TEXT_BLOCK


@dataclass(slots=True, eq=False)
class HeadingNode(BlockNode):
    kind: ClassVar[NodeKind] = NodeKind.HEADING

    level: int = 1


@dataclass(slots=True, eq=False)
class ThematicBreakNode(BlockNode):
    kind: ClassVar[NodeKind] = NodeKind.THEMATIC_BREAK


@dataclass(slots=True, eq=False)
class CodeBlockNode(BlockNode):
    kind: ClassVar[NodeKind] = NodeKind.CODE_BLOCK


@dataclass(slots=True, eq=False)
class FencedCodeNode(BlockNode):
    """Fenced code block.

    Attributes:
        fence_char: ``` ` ``` or ``~``
        fence_length: Length of the opening fence
        fence_indent: Indent width of the opening fence, stripped from
            content lines
        info: Info string after the opening fence

    """

    kind: ClassVar[NodeKind] = NodeKind.FENCED_CODE

    fence_char: str = "`"
    fence_length: int = 3
    fence_indent: int = 0
    info: str = ""


@dataclass(slots=True, eq=False)
class BlockQuoteNode(BlockNode):
    kind: ClassVar[NodeKind] = NodeKind.BLOCK_QUOTE


@dataclass(slots=True, eq=False)
class ListNode(BlockNode):
    """List container.

    Attributes:
        marker: Bullet character, or ``.``/``)`` for ordered lists
        start: Value of the first item (None for bullet lists)
        list_type: Display type; None for bullets and for lists whose first
            marker is ``#``
        is_tight: Cleared at close if blank lines separate the items

    """

    kind: ClassVar[NodeKind] = NodeKind.LIST

    marker: str = "-"
    start: int | None = None
    list_type: ListType | None = None
    is_tight: bool = True

    @property
    def ordered(self) -> bool:
        return self.marker in ".)"


@dataclass(slots=True, eq=False)
class ListItemNode(BlockNode):
    """List item.

    Attributes:
        offset: Column at which continuation lines must be indented
        value: Numeric value for ordered items, None for bullets

    """

    kind: ClassVar[NodeKind] = NodeKind.LIST_ITEM

    offset: int = 0
    value: int | None = None


@dataclass(slots=True, eq=False)
class AttributesNode(BlockNode):
    kind: ClassVar[NodeKind] = NodeKind.ATTRIBUTES


__all__ = [
    "AttributesNode",
    "BlockNode",
    "BlockQuoteNode",
    "CodeBlockNode",
    "DocumentNode",
    "FencedCodeNode",
    "HeadingNode",
    "ListItemNode",
    "ListNode",
    "NodeKind",
    "ParagraphNode",
    "TextBlockNode",
    "ThematicBreakNode",
]
