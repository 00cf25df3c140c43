"""Block attributes plugin for fancylists.

Adds ``{...}`` attribute lines that attach to the block right above them.

Usage:
    >>> md = Markdown(plugins=["attributes"])
    >>> md("1. one\\n2. two\\n{.sbs}\\n")
    '<ol class="fancy fl-num sbs" type="1" start="1">\\n<li>one</li>\\n<li>two</li>\\n</ol>\\n'

Syntax:
{.cls} → class="cls" (accumulates with other classes)
{#id} → id="id"
{key=value} or {key="quoted value"} → key="value"

Thread Safety:
This plugin is stateless and thread-safe.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fancylists.parsing.blocks import ATTRIBUTES_PRIORITY
from fancylists.parsing.blocks.attributes import BlockAttributesParser, attach_attribute_blocks
from fancylists.plugins import register_plugin

if TYPE_CHECKING:
    from fancylists.parsing.engine import Transformer
    from fancylists.parsing.protocols import BlockParser


@register_plugin("attributes")
class AttributesPlugin:
    """Plugin adding ``{.class #id key=value}`` block attribute lines."""

    @property
    def name(self) -> str:
        return "attributes"

    @property
    def config_flag(self) -> str:
        return "attributes_enabled"

    def extend_engine(
        self,
        parsers: list[tuple[int, BlockParser]],
        transformers: list[Transformer],
    ) -> None:
        """Register the attribute line parser and the attach pass."""
        parsers.append((ATTRIBUTES_PRIORITY, BlockAttributesParser()))
        transformers.append(attach_attribute_blocks)
