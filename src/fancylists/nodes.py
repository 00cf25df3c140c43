"""Typed AST nodes for fancylists.

All AST nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements work naturally

Node Hierarchy:
Node (base)
├── Block (block-level elements)
│   ├── Document
│   ├── Heading
│   ├── Paragraph
│   ├── TextBlock
│   ├── FencedCode
│   ├── IndentedCode
│   ├── BlockQuote
│   ├── List
│   ├── ListItem
│   └── ThematicBreak
└── Inline (inline elements)
    ├── Text
    ├── SoftBreak
    └── LineBreak

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from fancylists.attributes import Attribute
from fancylists.lists.types import ListType
from fancylists.location import SourceLocation

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes.

    All nodes track their source location for error messages and debugging.

    """

    location: SourceLocation


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text content."""

    content: str


@dataclass(frozen=True, slots=True)
class LineBreak(Node):
    """Hard line break.

    Markdown: ``\\`` at end of line or two trailing spaces
    HTML: <br />

    """


@dataclass(frozen=True, slots=True)
class SoftBreak(Node):
    """Soft line break (single newline in paragraph)."""


# PEP 695 type alias for inline elements
type Inline = Text | LineBreak | SoftBreak


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """ATX or setext heading.

    Markdown: # Heading or Heading\\n======
    HTML: <h1>Heading</h1>

    """

    level: Literal[1, 2, 3, 4, 5, 6]
    children: tuple[Inline, ...]
    attributes: tuple[Attribute, ...] = ()


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph block.

    Markdown: Text separated by blank lines
    HTML: <p>text</p>

    """

    children: tuple[Inline, ...]
    attributes: tuple[Attribute, ...] = ()


@dataclass(frozen=True, slots=True)
class TextBlock(Node):
    """Paragraph content of a tight list item, rendered without <p>."""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class FencedCode(Node):
    """Fenced code block.

    Markdown: ```lang\\ncode\\n```
    HTML: <pre><code class="language-lang">code</code></pre>

    """

    code: str
    info: str | None = None
    marker: Literal["`", "~"] = "`"
    attributes: tuple[Attribute, ...] = ()

    @property
    def language(self) -> str | None:
        """First word of the info string."""
        if not self.info:
            return None
        return self.info.split()[0]


@dataclass(frozen=True, slots=True)
class IndentedCode(Node):
    """Indented code block (4+ spaces).

    Markdown: ····code
    HTML: <pre><code>code</code></pre>

    """

    code: str
    attributes: tuple[Attribute, ...] = ()


@dataclass(frozen=True, slots=True)
class BlockQuote(Node):
    """Block quote.

    Markdown: > quoted text
    HTML: <blockquote>text</blockquote>

    """

    children: tuple[Block, ...]
    attributes: tuple[Attribute, ...] = ()


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """List item.

    ``value`` is the item's number in an ordered list (start plus
    position); None for bullet items. The renderer does not emit it.

    """

    children: tuple[Block, ...]
    value: int | None = None


@dataclass(frozen=True, slots=True)
class List(Node):
    """Ordered or unordered list.

    Markdown: - item, 1. item, a. item, iv. item, #. item
    HTML: <ul>/<ol> with <li> children

    ``list_type`` is None for bullet lists and for ordered lists whose first
    marker is ``#``; the latter render as numeric.

    """

    items: tuple[ListItem, ...]
    ordered: bool = False
    start: int = 1  # Value of the first item for ordered lists
    tight: bool = True  # Tight vs loose list
    list_type: ListType | None = None
    marker: str = "-"  # Bullet character, or "." / ")" for ordered lists
    attributes: tuple[Attribute, ...] = ()

    @property
    def display_type(self) -> ListType:
        """Type used for rendering an ordered list."""
        return self.list_type if self.list_type is not None else ListType.NUM


@dataclass(frozen=True, slots=True)
class ThematicBreak(Node):
    """Thematic break (horizontal rule).

    Markdown: --- or *** or ___
    HTML: <hr />

    """

    attributes: tuple[Attribute, ...] = ()


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root document node.

    Contains all top-level blocks in the document.

    """

    children: tuple[Block, ...]


# PEP 695 type alias for block elements
type Block = (
    Heading
    | Paragraph
    | TextBlock
    | FencedCode
    | IndentedCode
    | BlockQuote
    | List
    | ListItem
    | ThematicBreak
)


__all__ = [
    "Block",
    "BlockQuote",
    "Document",
    "FencedCode",
    "Heading",
    "IndentedCode",
    "Inline",
    "LineBreak",
    "List",
    "ListItem",
    "Node",
    "Paragraph",
    "SoftBreak",
    "Text",
    "TextBlock",
    "ThematicBreak",
]
