"""Error-path and malformed input tests.

Tests that exercise error handling, edge cases, and graceful degradation
for invalid Markdown input. Marker classification never raises; the only
errors come from plugin lookup, engine contract violations, and the
renderer meeting a node it does not know.
"""

import pytest

from fancylists import Markdown, parse, render
from fancylists.errors import FancyListsError, ParseError, PluginError, RenderError
from fancylists.location import SourceLocation
from fancylists.nodes import Document, Text
from fancylists.plugins import get_plugin

# =========================================================================
# ParseError construction and formatting
# =========================================================================


class TestParseErrorFormatting:
    """Verify ParseError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = ParseError("unexpected state")
        assert str(err) == "unexpected state"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_number(self) -> None:
        err = ParseError("bad state", lineno=42)
        assert str(err) == "42 bad state"

    def test_with_line_and_column(self) -> None:
        err = ParseError("missing marker", lineno=10, col_offset=5)
        assert "10:5" in str(err)

    def test_with_source_file(self) -> None:
        err = ParseError("error", lineno=1, col_offset=1, source_file="test.md")
        assert str(err) == "test.md:1:1 error"

    def test_is_fancylists_error(self) -> None:
        assert isinstance(ParseError("x"), FancyListsError)


# =========================================================================
# PluginError
# =========================================================================


class TestPluginErrors:
    """Unknown plugin names fail loudly."""

    def test_get_plugin_unknown(self) -> None:
        with pytest.raises(PluginError) as exc_info:
            get_plugin("tables")
        assert exc_info.value.plugin_name == "tables"
        assert "attributes" in str(exc_info.value)

    def test_markdown_unknown_plugin(self) -> None:
        with pytest.raises(PluginError, match="nope"):
            Markdown(plugins=["nope"])

    def test_parse_unknown_plugin(self) -> None:
        with pytest.raises(FancyListsError):
            parse("- a\n", plugins=["nope"])


# =========================================================================
# RenderError
# =========================================================================


class TestRenderErrors:
    """The renderer rejects nodes it cannot place."""

    def test_inline_in_block_position(self) -> None:
        loc = SourceLocation.unknown()
        doc = Document(loc, (Text(loc, "stray"),))  # type: ignore[arg-type]
        with pytest.raises(RenderError):
            render(doc)

    def test_is_fancylists_error(self) -> None:
        assert issubclass(RenderError, FancyListsError)


# =========================================================================
# Malformed markers degrade to paragraphs
# =========================================================================


class TestMalformedInput:
    """Input that looks list-like but is not never raises."""

    @pytest.mark.parametrize(
        "source",
        [
            "abcdefg. too many letters\n",
            "1234567890. too long\n",
            "a.missing space\n",
            "(a) parenthesized\n",
            "#) hash with paren is fine\n",
            "\t\t\n",
            "",
            "{.orphan}\n",
        ],
    )
    def test_never_raises(self, source: str) -> None:
        html = Markdown(plugins=["all"])(source)
        assert isinstance(html, str)

    def test_ten_digit_number_is_a_paragraph(self) -> None:
        assert Markdown()("1234567890. x\n") == "<p>1234567890. x</p>\n"

    def test_seven_letters_is_a_paragraph(self) -> None:
        assert Markdown()("abcdefg. x\n") == "<p>abcdefg. x</p>\n"

    def test_empty_document(self) -> None:
        assert Markdown()("") == ""
