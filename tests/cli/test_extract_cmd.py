"""Tests for ``configforge extract`` command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from configforge.cli.main import cli


class TestExtract:
    """Tests for fragment listing."""

    def test_text_output(self, runner: CliRunner, pasted_file: Path) -> None:
        result = runner.invoke(cli, ["extract", str(pasted_file)])
        assert result.exit_code == 0
        assert "lint-fix" in result.output
        assert "security" in result.output

    def test_json_output(self, runner: CliRunner, pasted_file: Path) -> None:
        result = runner.invoke(cli, ["extract", str(pasted_file), "--format", "json"])
        data = json.loads(result.output)
        assert data["counts"] == {"skill": 1, "rule": 1}
        paths = [fragment["inferred_path"] for fragment in data["fragments"]]
        assert paths == [".claude/rules/security.md", ".claude/skills/lint-fix/SKILL.md"]

    def test_category_filter(self, runner: CliRunner, pasted_file: Path) -> None:
        result = runner.invoke(
            cli, ["extract", str(pasted_file), "--format", "json", "--category", "skill"],
        )
        data = json.loads(result.output)
        assert [f["metadata"]["name"] for f in data["fragments"]] == ["lint-fix"]

    def test_stdin(self, runner: CliRunner) -> None:
        pasted = '{"mcpServers": {"github": {"command": "npx", "args": ["server-github"]}}}'
        result = runner.invoke(cli, ["extract", "-", "--format", "json"], input=pasted)
        assert result.exit_code == 0
        assert json.loads(result.output)["counts"] == {"mcp-server": 1}

    def test_nothing_found_exits_2(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["extract", "-"], input="hello")
        assert result.exit_code == 2
        assert "No importable fragments" in result.output

    def test_invalid_utf8_on_stdin(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["extract", "-"], input=b"# Notes\nKeep functions small \xff\xfe and pure.\n")
        assert result.exit_code == 0
        assert "notes" in result.output

    def test_missing_source_exits_2(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["extract", str(tmp_path / "nope.txt")])
        assert result.exit_code == 2
        assert "Error:" in result.output
