"""Tests for frontmatter header location and parsing."""

from __future__ import annotations

from configforge.extraction.frontmatter import find_headers, leading_header, parse_fields


class TestParseFields:
    """Tests for parse_fields()."""

    def test_valid_yaml(self) -> None:
        fields = parse_fields(["name: reviewer", "tools: [Read, Grep]", "user-invocable: true"])
        assert fields == {"name": "reviewer", "tools": ["Read", "Grep"], "user-invocable": True}

    def test_invalid_yaml_falls_back_to_loose_pairs(self) -> None:
        fields = parse_fields(["name: helper", "description: Use when: tests fail"])
        assert fields["name"] == "helper"
        assert fields["description"] == "Use when: tests fail"

    def test_deeply_nested_value_falls_back(self) -> None:
        fields = parse_fields(["name: " + "[" * 5000])
        assert fields["name"] == "[" * 5000

    def test_non_mapping_falls_back(self) -> None:
        assert parse_fields(["- just", "- a list"]) == {}


class TestFindHeaders:
    """Tests for find_headers()."""

    def test_single_header(self) -> None:
        lines = ["---", "name: a", "---", "body"]
        headers = find_headers(lines)
        assert len(headers) == 1
        assert headers[0].start == 0
        assert headers[0].end == 2
        assert headers[0].name == "a"

    def test_multiple_headers(self) -> None:
        lines = ["---", "name: a", "---", "body", "", "---", "name: b", "---", "more"]
        assert [h.name for h in find_headers(lines)] == ["a", "b"]

    def test_horizontal_rules_are_not_headers(self) -> None:
        lines = ["# Title", "", "---", "", "Some prose here.", "", "---", "tail"]
        assert find_headers(lines) == []

    def test_multiline_values(self) -> None:
        lines = ["---", "name: a", "description: >", "  spans two", "  lines", "---"]
        header = find_headers(lines)[0]
        assert header.fields["description"].startswith("spans two")

    def test_unnamed_header(self) -> None:
        header = find_headers(["---", "title: x", "---"])[0]
        assert header.name is None


class TestLeadingHeader:
    """Tests for leading_header()."""

    def test_header_after_blank_lines(self) -> None:
        header = leading_header(["", "", "---", "name: a", "---", "body"])
        assert header is not None
        assert header.start == 2
        assert header.name == "a"

    def test_text_before_header(self) -> None:
        assert leading_header(["intro", "---", "name: a", "---"]) is None

    def test_empty(self) -> None:
        assert leading_header([]) is None
