"""Unit tests for the line parser and renderer."""

from __future__ import annotations

import pytest

from headinghandler.config import FormatSettings
from headinghandler.models.line import ListMarker
from headinghandler.parser import parse_line, render_line


class TestIndentation:
    def test_tabs_counted_as_units(self) -> None:
        parsed = parse_line("\t\ttext")
        assert parsed.indent == 2
        assert parsed.prefix == ""
        assert parsed.text == "text"

    def test_indent_before_marker(self) -> None:
        parsed = parse_line("\t\t- item")
        assert parsed.indent == 2
        assert parsed.prefix == "- "
        assert parsed.marker == ListMarker.BULLET
        assert parsed.heading == 0
        assert parsed.text == "item"

    def test_whitespace_only_line(self) -> None:
        parsed = parse_line("\t\t")
        assert parsed.indent == 2
        assert parsed.text == ""

    def test_space_indent_unit(self) -> None:
        fmt = FormatSettings(indent_unit="    ")
        parsed = parse_line("        - item", fmt)
        assert parsed.indent == 2
        assert parsed.prefix == "- "

    def test_spaces_are_not_tab_units(self) -> None:
        # Irregular indentation: spaces do not count as tab units
        parsed = parse_line("  text")
        assert parsed.indent == 0
        assert parsed.text == "text"


class TestListMarkers:
    @pytest.mark.parametrize("raw", ["- item", "* item", "+ item"])
    def test_plain_bullets(self, raw: str) -> None:
        parsed = parse_line(raw)
        assert parsed.marker == ListMarker.BULLET
        assert parsed.prefix == raw[:2]
        assert parsed.text == "item"

    @pytest.mark.parametrize("raw", ["- [ ] task", "- [x] task", "- [X] task"])
    def test_checkboxes(self, raw: str) -> None:
        parsed = parse_line(raw)
        assert parsed.marker == ListMarker.CHECKBOX
        assert parsed.prefix == raw[:6]
        assert parsed.text == "task"

    def test_ordered(self) -> None:
        parsed = parse_line("12. twelfth")
        assert parsed.marker == ListMarker.ORDERED
        assert parsed.prefix == "12. "
        assert parsed.text == "twelfth"

    def test_marker_keeps_all_following_whitespace(self) -> None:
        parsed = parse_line("-   spaced")
        assert parsed.prefix == "-   "
        assert parsed.text == "spaced"

    def test_marker_at_end_of_line(self) -> None:
        parsed = parse_line("-")
        assert parsed.marker == ListMarker.BULLET
        assert parsed.prefix == "-"
        assert parsed.text == ""

    def test_empty_checkbox_at_end_of_line(self) -> None:
        parsed = parse_line("- [ ]")
        assert parsed.marker == ListMarker.CHECKBOX
        assert parsed.text == ""

    def test_bullet_before_link_is_not_checkbox(self) -> None:
        parsed = parse_line("- [link](https://example.com)")
        assert parsed.marker == ListMarker.BULLET
        assert parsed.text == "[link](https://example.com)"

    @pytest.mark.parametrize("raw", ["-item", "**bold**", "---", "1.5 ratio"])
    def test_marker_requires_following_whitespace(self, raw: str) -> None:
        parsed = parse_line(raw)
        assert parsed.marker == ListMarker.NONE
        assert parsed.prefix == ""
        assert parsed.text == raw


class TestHeadings:
    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_levels(self, level: int) -> None:
        parsed = parse_line("#" * level + " Title")
        assert parsed.heading == level
        assert parsed.text == "Title"

    def test_seven_markers_are_text(self) -> None:
        parsed = parse_line("####### Too deep")
        assert parsed.heading == 0
        assert parsed.text == "####### Too deep"

    def test_whitespace_after_markers_is_optional(self) -> None:
        parsed = parse_line("#tag")
        assert parsed.heading == 1
        assert parsed.text == "tag"

    def test_heading_after_bullet(self) -> None:
        parsed = parse_line("\t- ## Section")
        assert parsed.indent == 1
        assert parsed.prefix == "- "
        assert parsed.heading == 2
        assert parsed.text == "Section"

    def test_heading_recorded_on_ordered_item(self) -> None:
        parsed = parse_line("1. ## Step")
        assert parsed.marker == ListMarker.ORDERED
        assert parsed.heading == 2

    def test_custom_heading_char(self) -> None:
        parsed = parse_line("== Title", FormatSettings(heading_char="="))
        assert parsed.heading == 2
        assert parsed.text == "Title"


class TestPlainLines:
    def test_plain_text_yields_zero_values(self) -> None:
        parsed = parse_line("Just a paragraph.")
        assert parsed.indent == 0
        assert parsed.prefix == ""
        assert parsed.marker == ListMarker.NONE
        assert parsed.heading == 0
        assert parsed.text == "Just a paragraph."

    def test_empty_line(self) -> None:
        parsed = parse_line("")
        assert parsed.indent == 0
        assert parsed.heading == 0
        assert parsed.text == ""

    def test_original_content_is_verbatim(self) -> None:
        raw = "\t-   ##   Odd spacing"
        assert parse_line(raw).original_content == raw


class TestRender:
    def test_heading_zero_emits_no_marker_or_space(self) -> None:
        assert render_line(0, "- ", 0, "item") == "- item"
        assert render_line(0, "", 0, "Title") == "Title"

    def test_heading_after_prefix(self) -> None:
        assert render_line(2, "- ", 1, "item") == "\t\t- # item"

    def test_separator_added_when_prefix_has_no_trailing_space(self) -> None:
        assert render_line(0, "-", 2, "x") == "- ## x"

    def test_custom_format(self) -> None:
        fmt = FormatSettings(indent_unit="  ", heading_char="=")
        assert render_line(1, "* ", 3, "x", fmt) == "  * === x"


class TestRoundTrip:
    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "plain",
            "# H",
            "###### six",
            "\t- item",
            "\t\t- # item",
            "- [ ] task",
            "\t- [x] done",
            "1. one",
            "\t3. three",
            "* star",
            "+ plus",
            "\t\tindented text",
            "-   spaced bullet",
            "- [link](x)",
            "- ## bullet heading",
            "####### not a heading",
        ],
    )
    def test_render_parse_is_identity(self, raw: str) -> None:
        parsed = parse_line(raw)
        rendered = render_line(parsed.indent, parsed.prefix, parsed.heading, parsed.text)
        assert rendered == raw
