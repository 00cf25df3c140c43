"""Tests for block attribute lines and the attribute sum type."""

from __future__ import annotations

import pytest

from fancylists import Markdown
from fancylists.attributes import (
    ClassList,
    NumericValue,
    Passthrough,
    TypeSymbol,
    class_names,
    merge_attributes,
    parse_attribute_line,
)
from fancylists.lists.types import ListType

md = Markdown(plugins=["attributes"])


class TestParseAttributeLine:
    """The ``{...}`` mini-language."""

    def test_class(self) -> None:
        assert parse_attribute_line("{.sbs}") == (ClassList(("sbs",)),)

    def test_classes_merge(self) -> None:
        assert parse_attribute_line("{.a .b}") == (ClassList(("a", "b")),)

    def test_id(self) -> None:
        assert parse_attribute_line("{#intro}") == (Passthrough("id", "intro"),)

    def test_key_values(self) -> None:
        attrs = parse_attribute_line("{a=1 b=\"two words\" c='3'}")
        assert attrs == (Passthrough("a", "1"), Passthrough("b", "two words"), Passthrough("c", "3"))

    def test_surrounding_whitespace(self) -> None:
        assert parse_attribute_line("  {.x}  \n") == (ClassList(("x",)),)

    def test_first_appearance_order(self) -> None:
        attrs = parse_attribute_line('{.foo bar="baz" .qux}')
        assert attrs == (ClassList(("foo", "qux")), Passthrough("bar", "baz"))

    @pytest.mark.parametrize("text", ["{}", "{ }", "{.}", "{foo}", "{.a}x", "plain", "{a=}", "{.a.b}"])
    def test_malformed(self, text: str) -> None:
        assert parse_attribute_line(text) is None


class TestMergeAttributes:
    """Combining attribute runs."""

    def test_classes_accumulate(self) -> None:
        merged = merge_attributes((ClassList(("a",)),), (ClassList(("b", "a")),))
        assert merged == (ClassList(("a", "b")),)

    def test_later_value_wins(self) -> None:
        merged = merge_attributes((Passthrough("id", "x"),), (Passthrough("id", "y"),))
        assert merged == (Passthrough("id", "y"),)

    def test_class_names(self) -> None:
        attrs = (ClassList(("a",)), Passthrough("id", "x"), ClassList(("b",)))
        assert class_names(attrs) == ("a", "b")

    def test_names(self) -> None:
        assert ClassList(()).name == "class"
        assert TypeSymbol(ListType.LC_ROMAN).name == "type"
        assert NumericValue("start", 3).name == "start"


class TestListAttributes:
    """Attribute lines under lists."""

    def test_bullet_class(self) -> None:
        html = md("- First item\n- Second item\n- Third item\n{.sbs}\n")
        assert html.strip() == (
            '<ul class="sbs">\n<li>First item</li>\n<li>Second item</li>\n<li>Third item</li>\n</ul>'
        )

    def test_ordered_class_follows_fancy_classes(self) -> None:
        html = md("1. First item\n2. Second item\n3. Third item\n{.sbs}\n")
        assert html.strip() == (
            '<ol class="fancy fl-num sbs" type="1" start="1">\n'
            "<li>First item</li>\n<li>Second item</li>\n<li>Third item</li>\n</ol>"
        )

    def test_bullet_class_and_custom_attribute(self) -> None:
        html = md('- First item\n- Second item\n- Third item\n{.foo bar="baz"}\n')
        assert html.strip() == (
            '<ul class="foo" bar="baz">\n'
            "<li>First item</li>\n<li>Second item</li>\n<li>Third item</li>\n</ul>"
        )

    def test_custom_attribute_follows_start(self) -> None:
        html = md('1. First item\n2. Second item\n3. Third item\n{.foo bar="baz"}\n')
        assert html.strip() == (
            '<ol class="fancy fl-num foo" type="1" start="1" bar="baz">\n'
            "<li>First item</li>\n<li>Second item</li>\n<li>Third item</li>\n</ol>"
        )

    def test_user_type_is_not_repeated(self) -> None:
        html = md("a. one\nb. two\n{type=I .x}\n")
        assert html.startswith('<ol class="fancy fl-lcalpha x" type="a" start="1">')

    def test_fancy_list_with_id(self) -> None:
        html = md("iv. four\n#. five\n{#steps}\n")
        assert html.startswith('<ol class="fancy fl-lcroman" type="i" start="4" id="steps">')

    def test_invalid_lists_are_unaffected(self) -> None:
        assert md("-one\n\n2.two").strip() == "<p>-one</p>\n<p>2.two</p>"


class TestOtherBlocks:
    """Attribute lines attach to the block right above them."""

    def test_paragraph(self) -> None:
        assert md("Some text\n{.note}\n") == '<p class="note">Some text</p>\n'

    def test_heading(self) -> None:
        assert md("# Title\n{#top}\n") == '<h1 id="top">Title</h1>\n'

    def test_thematic_break(self) -> None:
        assert md("***\n{.fancy-rule}\n") == '<hr class="fancy-rule" />\n'

    def test_two_lines_merge(self) -> None:
        assert md("text\n{.a}\n{.b}\n") == '<p class="a b">text</p>\n'

    def test_inside_list_item(self) -> None:
        html = md("- item\n\n  para\n  {.inner}\n")
        assert '<p class="inner">para</p>' in html

    def test_orphan_line_is_dropped(self) -> None:
        assert md("{.nothing}\n\ntext\n") == "<p>text</p>\n"

    def test_values_are_escaped(self) -> None:
        html = md("text\n{title='a \"b\" <c>'}\n")
        assert html == '<p title="a &quot;b&quot; &lt;c&gt;">text</p>\n'

    def test_disabled_by_default(self) -> None:
        assert Markdown()("text\n{.a}\n") == "<p>text\n{.a}</p>\n"
