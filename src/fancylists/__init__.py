"""
fancylists: Markdown with Pandoc-style fancy ordered lists

A small Markdown block parser whose ordered lists accept alphabetic
(``a.``, ``B)``), roman (``iv.``, ``II)``) and continuation (``#.``)
markers alongside plain numbers. A new list starts whenever the marker
type changes, and every list renders with its type, class and start.

Quick Start:
    >>> from fancylists import parse, render
    >>> doc = parse("i. one\\nii. two\\n")
    >>> print(render(doc), end="")
    <ol class="fancy fl-lcroman" type="i" start="1">
    <li>one</li>
    <li>two</li>
    </ol>

    >>> # Or use the high-level Markdown class
    >>> from fancylists import Markdown
    >>> md = Markdown(plugins=["attributes"])
    >>> html = md("a. one\\nb. two\\n{.steps}\\n")

Installation:
    pip install fancylists            # zero runtime dependencies
"""

from collections.abc import Iterable

from fancylists.attributes import (
    Attribute,
    ClassList,
    NumericValue,
    Passthrough,
    TypeSymbol,
)
from fancylists.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from fancylists.errors import FancyListsError, ParseError, PluginError, RenderError
from fancylists.lists.types import ListType, MarkerKind, ScanResult
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
from fancylists.parsing.engine import BlockEngine
from fancylists.parsing.freeze import freeze
from fancylists.plugins import config_for_plugins
from fancylists.renderers.html import HtmlRenderer
from fancylists.renderers.protocol import ASTRenderer

__version__ = "0.1.0"


def _normalize_newlines(source: str) -> str:
    return source.replace("\r\n", "\n").replace("\r", "\n")


def _parse_with(engine: BlockEngine, source: str, source_file: str | None) -> Document:
    root = engine.parse(_normalize_newlines(source), source_file=source_file)
    return freeze(root, source_file=source_file)


def parse(
    source: str,
    *,
    source_file: str | None = None,
    plugins: Iterable[str] | None = None,
) -> Document:
    """Parse Markdown source into a typed AST.

    Args:
        source: Markdown source text
        source_file: Optional source file path for error messages
        plugins: Plugin names to enable on top of the current config
            (e.g. ``["attributes"]``); ``["all"]`` enables every plugin

    Returns:
        Document AST root node

    Raises:
        PluginError: If a plugin name is not recognized

    Example:
        >>> doc = parse("a. one\\nb. two\\n")
        >>> doc.children[0].list_type
        <ListType.LC_ALPHA: 'a'>
    """
    config = config_for_plugins(plugins, base=get_parse_config())
    with parse_config_context(config):
        return _parse_with(BlockEngine.for_config(config), source, source_file)


def render(doc: Document, *, heading_ids: bool = False) -> str:
    """Render an AST Document to HTML.

    Args:
        doc: Document AST to render
        heading_ids: Add slug ``id`` attributes to headings

    Returns:
        HTML string

    Example:
        >>> render(parse("- a\\n- b\\n"))
        '<ul>\\n<li>a</li>\\n<li>b</li>\\n</ul>\\n'
    """
    return HtmlRenderer(heading_ids=heading_ids).render(doc)


class Markdown:
    """High-level Markdown processor combining parser and renderer.

    Usage:
        >>> md = Markdown()
        >>> md("A. first\\nB. second\\n")
        '<ol class="fancy fl-ucalpha" type="A" start="1">\\n<li>first</li>\\n<li>second</li>\\n</ol>\\n'

        >>> # Access the AST
        >>> doc = md.parse("iv. four\\n")
        >>> doc.children[0].start
        4

    Thread Safety:
        The engine and renderer are built once and hold no per-parse state;
        config is published per call through a ContextVar. Safe to share one
        instance across threads.

    """

    __slots__ = ("_config", "_engine", "_plugins", "_renderer")

    def __init__(
        self,
        *,
        plugins: list[str] | None = None,
        heading_ids: bool = False,
    ) -> None:
        """Initialize Markdown processor.

        Args:
            plugins: List of plugin names to enable (e.g., ["attributes"]).
                Use ["all"] to enable all built-in plugins.
            heading_ids: Add slug ``id`` attributes to headings

        Raises:
            PluginError: If a plugin name is not recognized
        """
        self._plugins = list(plugins or [])
        # Build immutable config once (thread-safe, reused across calls)
        self._config = config_for_plugins(self._plugins)
        self._engine = BlockEngine.for_config(self._config)
        self._renderer = HtmlRenderer(heading_ids=heading_ids)

    @property
    def config(self) -> ParseConfig:
        """The parse configuration this processor uses."""
        return self._config

    def __call__(self, source: str) -> str:
        """Parse and render Markdown in one call.

        Args:
            source: Markdown source text

        Returns:
            HTML string

        """
        return self.render(self.parse(source))

    def parse(self, source: str, *, source_file: str | None = None) -> Document:
        """Parse Markdown source into AST.

        Args:
            source: Markdown source text
            source_file: Optional source file path for error messages

        Returns:
            Document AST root node

        """
        with parse_config_context(self._config):
            return _parse_with(self._engine, source, source_file)

    def parse_many(
        self,
        sources: Iterable[str],
        *,
        source_file: str | None = None,
    ) -> list[Document]:
        """Parse multiple Markdown sources into AST documents.

        Sets config once, parses all, restores once.

        Example:
            >>> md = Markdown()
            >>> docs = md.parse_many(["a. one\\n", "i. one\\n"])
            >>> [d.children[0].list_type.value for d in docs]
            ['a', 'i']
        """
        with parse_config_context(self._config):
            return [_parse_with(self._engine, source, source_file) for source in sources]

    def render(self, doc: Document) -> str:
        """Render a Document to HTML."""
        return self._renderer.render(doc)


__all__ = [
    # High-level API
    "parse",
    "render",
    "Markdown",
    # Engine and rendering
    "BlockEngine",
    "HtmlRenderer",
    "ASTRenderer",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "FancyListsError",
    "ParseError",
    "PluginError",
    "RenderError",
    # List markers
    "ListType",
    "MarkerKind",
    "ScanResult",
    # Attributes
    "Attribute",
    "ClassList",
    "NumericValue",
    "Passthrough",
    "TypeSymbol",
    # Location
    "SourceLocation",
    # Nodes
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
    "Paragraph",
    "SoftBreak",
    "Text",
    "TextBlock",
    "ThematicBreak",
    # Version
    "__version__",
]
