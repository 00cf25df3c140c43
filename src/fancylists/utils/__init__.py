"""Shared utilities for fancylists."""

from fancylists.utils.logger import get_logger
from fancylists.utils.text import (
    indent_position,
    indent_width,
    is_blank,
    is_thematic_break,
    setext_bar_char,
    slugify,
    tab_width,
)

__all__ = [
    "get_logger",
    "indent_position",
    "indent_width",
    "is_blank",
    "is_thematic_break",
    "setext_bar_char",
    "slugify",
    "tab_width",
]
