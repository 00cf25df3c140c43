"""Convert the finished block tree into the immutable AST.

Leaf text is split into inline nodes here: each line becomes a Text node,
joined by SoftBreak, or LineBreak when the line ends with two or more
spaces or a backslash.
"""

from __future__ import annotations

from collections.abc import Sequence

from fancylists.errors import ParseError
from fancylists.location import SourceLocation
from fancylists.nodes import (
    Block,
    BlockQuote,
    Document,
    FencedCode,
    Heading,
    IndentedCode,
    Inline,
    LineBreak,
    List,
    ListItem,
    Paragraph,
    SoftBreak,
    Text,
    TextBlock,
    ThematicBreak,
)
from fancylists.parsing.tree import (
    BlockNode,
    BlockQuoteNode,
    CodeBlockNode,
    DocumentNode,
    FencedCodeNode,
    HeadingNode,
    ListItemNode,
    ListNode,
    ParagraphNode,
    TextBlockNode,
    ThematicBreakNode,
)


def split_inlines(lines: Sequence[str], lineno: int, source_file: str | None = None) -> tuple[Inline, ...]:
    """Turn the raw lines of a leaf block into inline nodes.

    Args:
        lines: Leaf lines; every line but the last ends with a newline
        lineno: 1-based line number of the first line
        source_file: Optional file name for locations

    Example:
        >>> [type(n).__name__ for n in split_inlines(["a  \\n", "b"], 1)]
        ['Text', 'LineBreak', 'Text']

    """
    parts = "".join(lines).split("\n")
    inlines: list[Inline] = []
    last = len(parts) - 1
    for index, part in enumerate(parts):
        location = SourceLocation(lineno=lineno + index, col_offset=1, source_file=source_file)
        hard_break = False
        if index < last:
            if part.endswith("\\"):
                part = part[:-1]
                hard_break = True
            else:
                stripped = part.rstrip(" ")
                hard_break = len(part) - len(stripped) >= 2
                part = stripped.rstrip("\t")
        if index > 0:
            part = part.lstrip(" \t")
        if part:
            inlines.append(Text(location, part))
        if index < last:
            inlines.append(LineBreak(location) if hard_break else SoftBreak(location))
    return tuple(inlines)


class TreeFreezer:
    """Builds a Document from a closed DocumentNode."""

    __slots__ = ("_source_file",)

    def __init__(self, source_file: str | None = None) -> None:
        self._source_file = source_file

    def freeze(self, root: DocumentNode) -> Document:
        return Document(
            location=self._location(root, 0),
            children=self._blocks(root.children),
        )

    def _location(self, node: BlockNode, span: int) -> SourceLocation:
        lineno = node.lineno + 1
        return SourceLocation(
            lineno=lineno,
            col_offset=1,
            end_lineno=lineno + span - 1 if span > 1 else None,
            source_file=self._source_file,
        )

    def _blocks(self, nodes: Sequence[BlockNode]) -> tuple[Block, ...]:
        return tuple(self._block(node) for node in nodes)

    def _block(self, node: BlockNode) -> Block:
        location = self._location(node, len(node.lines))
        attrs = tuple(node.attributes)
        match node:
            case ParagraphNode():
                return Paragraph(location, self._inlines(node), attributes=attrs)
            case TextBlockNode():
                return TextBlock(location, self._inlines(node))
            case HeadingNode():
                return Heading(location, node.level, self._inlines(node), attributes=attrs)  # type: ignore[arg-type]
            case ThematicBreakNode():
                return ThematicBreak(location, attributes=attrs)
            case FencedCodeNode():
                return FencedCode(
                    location,
                    "".join(node.lines),
                    info=node.info or None,
                    marker="~" if node.fence_char == "~" else "`",
                    attributes=attrs,
                )
            case CodeBlockNode():
                return IndentedCode(location, "".join(node.lines), attributes=attrs)
            case BlockQuoteNode():
                return BlockQuote(location, self._blocks(node.children), attributes=attrs)
            case ListNode():
                return List(
                    location,
                    items=tuple(self._item(child) for child in node.children),
                    ordered=node.ordered,
                    start=node.start if node.start is not None else 1,
                    tight=node.is_tight,
                    list_type=node.list_type,
                    marker=node.marker,
                    attributes=attrs,
                )
            case ListItemNode():
                return self._item(node)
            case _:
                raise ParseError(
                    f"Unexpected {type(node).__name__} in finished tree",
                    lineno=node.lineno + 1,
                    source_file=self._source_file,
                )

    def _item(self, node: BlockNode) -> ListItem:
        if not isinstance(node, ListItemNode):
            raise ParseError(
                f"List contains {type(node).__name__}, expected a list item",
                lineno=node.lineno + 1,
                source_file=self._source_file,
            )
        return ListItem(
            self._location(node, 0),
            children=self._blocks(node.children),
            value=node.value,
        )

    def _inlines(self, node: BlockNode) -> tuple[Inline, ...]:
        return split_inlines(node.lines, node.lineno + 1, self._source_file)


def freeze(root: DocumentNode, *, source_file: str | None = None) -> Document:
    """Convert a closed block tree into a Document."""
    return TreeFreezer(source_file).freeze(root)


__all__ = ["TreeFreezer", "freeze", "split_inlines"]
