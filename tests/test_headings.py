"""Tests for heading extraction and outline building."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from conftest import doc, text
from richtext2html.headings import (
    build_outline,
    extract_headings,
    heading_id_map,
    heading_level,
    html_heading_level,
)
from richtext2html.schemas import HeadingItem


def _heading(value: str, tag: str | None = "h2") -> dict[str, Any]:
    node: dict[str, Any] = {"type": "heading", "children": [text(value)]}
    if tag is not None:
        node["tag"] = tag
    return node


class TestHeadingLevel:
    """Tests for heading_level function."""

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("h1", 1),
            ("h3", 3),
            ("H4", 4),
            ("heading-5", 5),
            ("6", 6),
            ("h7", 7),
            ("h10", 10),
            ("h0", 0),
            ("h" + "1" * 5000, 2),
            ("h1234", 2),
            (None, 2),
            ("hx", 2),
            (3, 2),
        ],
    )
    def test_parses_tag(self, tag: Any, expected: int) -> None:
        assert heading_level(tag) == expected

    def test_uses_given_default(self) -> None:
        assert heading_level(None, default=4) == 4

    @pytest.mark.parametrize(("level", "expected"), [(0, 1), (1, 1), (6, 6), (9, 6)])
    def test_html_heading_level_clamps(self, level: int, expected: int) -> None:
        assert html_heading_level(level) == expected


class TestExtractHeadings:
    """Tests for extract_headings function."""

    def test_extracts_h2_heading(self) -> None:
        headings = extract_headings(doc(_heading("Section One")))
        assert headings == [HeadingItem(id="section-one", text="Section One", level=2)]

    def test_extracts_multiple_levels(self) -> None:
        headings = extract_headings(
            doc(
                _heading("Main Section", "h2"),
                _heading("Sub Section", "h3"),
                _heading("Deep Section", "h4"),
            )
        )
        assert [heading.level for heading in headings] == [2, 3, 4]

    def test_ignores_non_heading_nodes(self) -> None:
        headings = extract_headings(
            doc(
                {"type": "paragraph", "children": [text("Hello world")]},
                _heading("Section"),
                {"type": "list", "children": []},
            )
        )
        assert [heading.text for heading in headings] == ["Section"]

    def test_defaults_level_when_tag_missing(self) -> None:
        headings = extract_headings(doc(_heading("Untagged", tag=None)))
        assert headings[0].level == 2

    def test_keeps_levels_beyond_html_range(self) -> None:
        headings = extract_headings(doc(_heading("Seven", "h7"), _heading("Zero", "h0")))
        assert [heading.level for heading in headings] == [7, 0]

    def test_oversized_tag_number_falls_back_to_default(self) -> None:
        headings = extract_headings(doc(_heading("Huge", "h" + "1" * 5000)))
        assert headings[0].level == 2

    def test_trims_heading_text(self) -> None:
        headings = extract_headings(doc(_heading("  Spaced Heading  ")))
        assert headings[0].text == "Spaced Heading"
        assert headings[0].id == "spaced-heading"

    def test_skips_blank_headings(self) -> None:
        headings = extract_headings(doc(_heading("   "), _heading("Valid Heading")))
        assert [heading.text for heading in headings] == ["Valid Heading"]

    def test_keeps_punctuation_only_heading_with_empty_id(self) -> None:
        headings = extract_headings(doc(_heading("???")))
        assert headings == [HeadingItem(id="", text="???", level=2)]

    def test_joins_formatted_text_runs(self) -> None:
        heading = {
            "type": "heading",
            "tag": "h2",
            "children": [text("Parent "), text("Heading", 1)],
        }
        headings = extract_headings(doc(heading))
        assert headings[0].text == "Parent Heading"
        assert headings[0].id == "parent-heading"

    def test_finds_nested_headings_in_document_order(
        self, article_document: dict[str, Any]
    ) -> None:
        headings = extract_headings(article_document)
        assert [(h.id, h.text, h.level) for h in headings] == [
            ("launch-guide", "Launch Guide", 1),
            ("getting-started-part-1", "Getting Started: Part 1!", 2),
            ("install-deps", "Install deps", 3),
            ("spaced-out", "Spaced  Out", 3),
            ("faq", "FAQ", 2),
        ]

    def test_keeps_duplicate_headings(self) -> None:
        headings = extract_headings(doc(_heading("FAQ"), _heading("FAQ", "h3")))
        assert [heading.id for heading in headings] == ["faq", "faq"]

    def test_accepts_bare_root_node(self) -> None:
        root = {"type": "root", "children": [_heading("Bare")]}
        assert [heading.id for heading in extract_headings(root)] == ["bare"]

    def test_accepts_root_without_type(self) -> None:
        content = {"root": {"children": [_heading("Untyped Root")]}}
        assert [heading.id for heading in extract_headings(content)] == ["untyped-root"]

    @pytest.mark.parametrize("content", [None, {}, {"root": None}, "text", 42, []])
    def test_returns_empty_for_missing_root(self, content: Any) -> None:
        assert extract_headings(content) == []

    def test_tolerates_malformed_nodes(self) -> None:
        content = doc(
            {"type": "paragraph", "children": "oops"},
            {"children": [_heading("Found")]},
            {"type": 7},
        )
        assert [heading.text for heading in extract_headings(content)] == ["Found"]

    def test_does_not_mutate_input(self, article_document: dict[str, Any]) -> None:
        snapshot = copy.deepcopy(article_document)
        extract_headings(article_document)
        assert article_document == snapshot


class TestHeadingIdMap:
    """Tests for heading_id_map function."""

    def test_maps_text_to_id(self) -> None:
        headings = [HeadingItem(id="setup", text="Setup", level=2)]
        assert heading_id_map(headings) == {"Setup": "setup"}

    def test_last_duplicate_wins(self) -> None:
        headings = [
            HeadingItem(id="first", text="Same", level=2),
            HeadingItem(id="second", text="Same", level=3),
        ]
        assert heading_id_map(headings) == {"Same": "second"}


class TestBuildOutline:
    """Tests for build_outline function."""

    def test_nests_deeper_headings(self, article_document: dict[str, Any]) -> None:
        outline = build_outline(extract_headings(article_document))

        assert [node.id for node in outline] == ["launch-guide"]
        top = outline[0]
        assert [node.id for node in top.children] == ["getting-started-part-1", "faq"]
        assert [node.id for node in top.children[0].children] == [
            "install-deps",
            "spaced-out",
        ]
        assert top.children[1].children == []

    def test_skipped_levels_nest_under_nearest_shallower(self) -> None:
        headings = [
            HeadingItem(id="a", text="A", level=2),
            HeadingItem(id="b", text="B", level=4),
            HeadingItem(id="c", text="C", level=3),
        ]
        outline = build_outline(headings)
        assert [node.id for node in outline] == ["a"]
        assert [node.id for node in outline[0].children] == ["b", "c"]

    def test_empty_input(self) -> None:
        assert build_outline([]) == []
