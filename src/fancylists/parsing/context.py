"""Per-document parse context.

Holds the stack of open blocks and the scratch flags block parsers use to
talk to each other. One ParseContext is created per parse and discarded
afterwards, so separate parses never observe each other's state.

Thread Safety:
    Not shared; each parse owns its context.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from fancylists.config import ParseConfig, get_parse_config

if TYPE_CHECKING:
    from fancylists.parsing.protocols import BlockParser
    from fancylists.parsing.tree import BlockNode


@dataclass(slots=True)
class OpenBlock:
    """An open block and the parser that owns it."""

    node: BlockNode
    parser: BlockParser


@dataclass(slots=True)
class ParseContext:
    """Mutable state for one parse.

    Attributes:
        config: Configuration captured when the parse started
        source_file: Optional file name for error messages
        opened_blocks: Open blocks from outermost to innermost
        block_offset: Index of the first non-space character of the current
            line, or -1 if the rest of the line is blank
        block_indent: Indent width of the current line, or -1 if blank
        skip_list_open: A list item closed because the line starts a new
            item; the next list-open attempt must step aside so the item
            parser gets the line
        empty_item_with_blank_lines: The last list item is empty and a
            blank line followed it
        setext_paragraph: Paragraph about to become a setext heading

    """

    config: ParseConfig = field(default_factory=get_parse_config)
    source_file: str | None = None
    opened_blocks: list[OpenBlock] = field(default_factory=list)
    block_offset: int = -1
    block_indent: int = -1
    skip_list_open: bool = False
    empty_item_with_blank_lines: bool = False
    setext_paragraph: BlockNode | None = None

    def last_opened_block(self) -> OpenBlock | None:
        return self.opened_blocks[-1] if self.opened_blocks else None

    def is_open(self, node: BlockNode) -> bool:
        return any(block.node is node for block in self.opened_blocks)


__all__ = ["OpenBlock", "ParseContext"]
