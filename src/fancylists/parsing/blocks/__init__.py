"""Built-in block parsers.

Priorities follow the usual Markdown precedence: a setext underline beats a
thematic break, a thematic break beats a bullet list item, and paragraphs
are the fallback.
"""

from fancylists.parsing.blocks.code import FencedCodeParser, IndentedCodeParser
from fancylists.parsing.blocks.heading import ATXHeadingParser, SetextHeadingParser
from fancylists.parsing.blocks.lists import FancyListItemParser, FancyListParser
from fancylists.parsing.blocks.paragraph import ParagraphParser
from fancylists.parsing.blocks.quote import BlockQuoteParser
from fancylists.parsing.blocks.thematic import ThematicBreakParser
from fancylists.parsing.protocols import BlockParser

SETEXT_HEADING_PRIORITY = 100
THEMATIC_BREAK_PRIORITY = 200
LIST_PRIORITY = 300
LIST_ITEM_PRIORITY = 400
INDENTED_CODE_PRIORITY = 500
ATX_HEADING_PRIORITY = 600
FENCED_CODE_PRIORITY = 700
BLOCK_QUOTE_PRIORITY = 800
ATTRIBUTES_PRIORITY = 900
PARAGRAPH_PRIORITY = 1000


def default_block_parsers() -> list[tuple[int, BlockParser]]:
    """Fresh (priority, parser) pairs for every built-in block."""
    return [
        (SETEXT_HEADING_PRIORITY, SetextHeadingParser()),
        (THEMATIC_BREAK_PRIORITY, ThematicBreakParser()),
        (LIST_PRIORITY, FancyListParser()),
        (LIST_ITEM_PRIORITY, FancyListItemParser()),
        (INDENTED_CODE_PRIORITY, IndentedCodeParser()),
        (ATX_HEADING_PRIORITY, ATXHeadingParser()),
        (FENCED_CODE_PRIORITY, FencedCodeParser()),
        (BLOCK_QUOTE_PRIORITY, BlockQuoteParser()),
        (PARAGRAPH_PRIORITY, ParagraphParser()),
    ]


__all__ = [
    "ATTRIBUTES_PRIORITY",
    "ATXHeadingParser",
    "BlockQuoteParser",
    "FancyListItemParser",
    "FancyListParser",
    "FencedCodeParser",
    "IndentedCodeParser",
    "ParagraphParser",
    "SetextHeadingParser",
    "ThematicBreakParser",
    "default_block_parsers",
]
