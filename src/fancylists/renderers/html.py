"""HTML renderer using StringBuilder pattern.

Renders the typed AST to HTML in a single walk.

List markup:
- Ordered lists carry ``class="fancy fl-<type>"``, ``type`` and an
  always-present ``start``: ``<ol class="fancy fl-lcalpha" type="a" start="1">``
- User classes (attributes plugin) are appended to the computed classes;
  other user attributes follow ``start`` in first-appearance order
- Unordered lists get only user attributes: ``<ul class="sbs">``
- Items never carry ``value``; numbering is ``start`` plus position

Thread Safety:
All per-render state is encapsulated in RenderContext, created fresh for each
render() call. Multiple threads can safely share a single HtmlRenderer instance
and call render() concurrently without synchronization.
"""

from __future__ import annotations

import html
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from fancylists.attributes import (
    Attribute,
    ClassList,
    NumericValue,
    Passthrough,
    TypeSymbol,
    class_names,
)
from fancylists.errors import RenderError
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
from fancylists.stringbuilder import StringBuilder
from fancylists.utils.text import slugify as default_slugify

# Rendered by the list itself, never passed through from user attributes
_LIST_OWNED_ATTRIBUTES = frozenset({"class", "type"})


def html_escape(s: str) -> str:
    """Escape HTML special characters.

    CommonMark-compliant: escapes <, >, &, " but NOT single quotes.
    Python's html.escape() escapes ' to &#x27; which CommonMark doesn't require.
    """
    return html.escape(s, quote=False).replace('"', "&quot;")


def list_attributes(lst: List) -> tuple[Attribute, ...]:
    """All attributes of a list's opening tag, in output order.

    Example:
        >>> from fancylists.location import SourceLocation
        >>> lst = List(SourceLocation.unknown(), (), ordered=True, start=3)
        >>> list_attributes(lst)
        (ClassList(names=('fancy', 'fl-num')), TypeSymbol(list_type=<ListType.NUM: '1'>), NumericValue(name='start', value=3))

    """
    user_classes = class_names(lst.attributes)
    others = tuple(a for a in lst.attributes if a.name not in _LIST_OWNED_ATTRIBUTES)
    if not lst.ordered:
        classes: tuple[Attribute, ...] = (ClassList(user_classes),) if user_classes else ()
        return classes + others
    list_type = lst.display_type
    return (
        ClassList(("fancy", list_type.css_class, *user_classes)),
        TypeSymbol(list_type),
        NumericValue("start", lst.start),
    ) + others


@dataclass(slots=True)
class RenderContext:
    """Per-render mutable state.

    Created fresh for each render, ensuring thread safety when sharing
    HtmlRenderer instances across threads.
    """

    seen_slugs: set[str] = field(default_factory=set)


class HtmlRenderer:
    """Render AST to HTML using StringBuilder pattern.

    Usage:
        >>> from fancylists import parse
        >>> HtmlRenderer().render(parse("a. one\\nb. two\\n"))
        '<ol class="fancy fl-lcalpha" type="a" start="1">\\n<li>one</li>\\n<li>two</li>\\n</ol>\\n'

    Thread Safety:
        Multiple threads can safely share a single HtmlRenderer instance.
        Each render() call creates an independent RenderContext.
    """

    __slots__ = ("_heading_ids", "_slugify")

    def __init__(
        self,
        *,
        heading_ids: bool = False,
        slugify: Callable[[str], str] | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            heading_ids: Emit an ``id`` on headings, derived from their text
                unless the heading carries an explicit ``{#id}``
            slugify: Optional custom slugify function for heading IDs
        """
        self._heading_ids = heading_ids
        self._slugify = slugify or default_slugify

    def render(self, node: Document) -> str:
        """Render document AST to HTML string.

        Raises:
            RenderError: If the tree contains a node the renderer does not know

        """
        ctx = RenderContext()
        sb = StringBuilder()
        for child in node.children:
            self._render_block(child, sb, ctx)
        return sb.build()

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_block(self, block: Block, sb: StringBuilder, ctx: RenderContext) -> None:
        """Render a block node."""
        match block:
            case Heading():
                self._render_heading(block, sb, ctx)
            case Paragraph():
                sb.append("<p")
                self._render_attributes(block.attributes, sb)
                sb.append(">")
                self._render_inlines(block.children, sb)
                sb.append("</p>\n")
            case TextBlock():
                self._render_inlines(block.children, sb)
                sb.append("\n")
            case FencedCode():
                self._render_code(block.code, block.language, sb)
            case IndentedCode():
                self._render_code(block.code, None, sb)
            case BlockQuote():
                sb.append("<blockquote")
                self._render_attributes(block.attributes, sb)
                sb.append(">\n")
                for child in block.children:
                    self._render_block(child, sb, ctx)
                sb.append("</blockquote>\n")
            case List():
                self._render_list(block, sb, ctx)
            case ListItem():
                # Should be rendered by list, but handle standalone
                self._render_list_item(block, sb, ctx)
            case ThematicBreak():
                sb.append("<hr")
                self._render_attributes(block.attributes, sb)
                sb.append(" />\n")
            case _:
                raise RenderError(f"Cannot render node of type {type(block).__name__}")

    def _render_heading(self, heading: Heading, sb: StringBuilder, ctx: RenderContext) -> None:
        """Render heading, with a unique ID when heading_ids is on."""
        attrs: Iterable[Attribute] = heading.attributes
        if self._heading_ids and not any(a.name == "id" for a in heading.attributes):
            slug = self._slugify(self._extract_text(heading.children))
            original_slug = slug
            counter = 1
            while slug in ctx.seen_slugs:
                slug = f"{original_slug}-{counter}"
                counter += 1
            ctx.seen_slugs.add(slug)
            attrs = (Passthrough("id", slug), *heading.attributes)

        sb.append(f"<h{heading.level}")
        self._render_attributes(attrs, sb)
        sb.append(">")
        self._render_inlines(heading.children, sb)
        sb.append(f"</h{heading.level}>\n")

    def _render_code(self, code: str, language: str | None, sb: StringBuilder) -> None:
        lang_class = f' class="language-{html_escape(language)}"' if language else ""
        sb.append(f"<pre><code{lang_class}>")
        sb.append(html_escape(code))
        sb.append("</code></pre>\n")

    def _render_list(self, lst: List, sb: StringBuilder, ctx: RenderContext) -> None:
        """Render ordered or unordered list."""
        tag = "ol" if lst.ordered else "ul"
        sb.append(f"<{tag}")
        self._render_attributes(list_attributes(lst), sb)
        sb.append(">\n")
        for item in lst.items:
            self._render_list_item(item, sb, ctx)
        sb.append(f"</{tag}>\n")

    def _render_list_item(self, item: ListItem, sb: StringBuilder, ctx: RenderContext) -> None:
        """Render list item.

        Tight items hold TextBlocks: their text follows ``<li>`` directly and
        is followed by a newline only when another block comes after it.
        Any other first block starts on a new line.
        """
        sb.append("<li>")
        children = item.children
        if children and not isinstance(children[0], TextBlock):
            sb.append("\n")
        last = len(children) - 1
        for index, child in enumerate(children):
            if isinstance(child, TextBlock):
                self._render_inlines(child.children, sb)
                if index < last and child.children:
                    sb.append("\n")
            else:
                self._render_block(child, sb, ctx)
        sb.append("</li>\n")

    # =========================================================================
    # Attributes
    # =========================================================================

    def _render_attributes(self, attrs: Iterable[Attribute], sb: StringBuilder) -> None:
        """Append `` name="value"`` for each attribute."""
        for attr in attrs:
            match attr:
                case ClassList(names=names):
                    if names:
                        sb.append(f' class="{html_escape(" ".join(names))}"')
                case TypeSymbol(list_type=list_type):
                    sb.append(f' type="{list_type.symbol}"')
                case NumericValue(name=name, value=value):
                    sb.append(f' {name}="{value}"')
                case Passthrough(name=name, value=value):
                    sb.append(f' {name}="{html_escape(value)}"')

    # =========================================================================
    # Inline rendering
    # =========================================================================

    def _render_inlines(self, inlines: tuple[Inline, ...], sb: StringBuilder) -> None:
        """Render a sequence of inline nodes."""
        for inline in inlines:
            match inline:
                case Text():
                    sb.append(html_escape(inline.content))
                case SoftBreak():
                    sb.append("\n")
                case LineBreak():
                    sb.append("<br />\n")
                case _:
                    raise RenderError(f"Cannot render inline of type {type(inline).__name__}")

    def _extract_text(self, inlines: tuple[Inline, ...]) -> str:
        """Plain text of inline content, for slugs."""
        parts: list[str] = []
        for inline in inlines:
            if isinstance(inline, Text):
                parts.append(inline.content)
            elif isinstance(inline, SoftBreak | LineBreak):
                parts.append(" ")
        return "".join(parts)


__all__ = ["HtmlRenderer", "RenderContext", "html_escape", "list_attributes"]
