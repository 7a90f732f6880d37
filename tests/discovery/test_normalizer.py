"""Tests for the text normalizer."""

from __future__ import annotations

from configforge.discovery import normalize


class TestNormalize:
    """Tests for normalize()."""

    def test_empty_input(self) -> None:
        result = normalize("")
        assert result.raw == ""
        assert result.folded == ""
        assert result.lines == ()

    def test_raw_is_untouched(self) -> None:
        text = "  CLAUDE.md \n\n"
        assert normalize(text).raw == text

    def test_folded_is_casefolded(self) -> None:
        assert normalize("PreToolUse STRASSE").folded == "pretooluse strasse"

    def test_lines_are_stripped_and_non_blank(self) -> None:
        result = normalize("  # Title  \n\n\t\n body line\n")
        assert result.lines == ("# Title", "body line")

    def test_crlf_line_endings(self) -> None:
        assert normalize("one\r\ntwo\r\n").lines == ("one", "two")
