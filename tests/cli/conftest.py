"""Shared fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

BANNER = "=" * 60

PASTED_CONFIG = (
    f"{BANNER}\n.claude/rules/security.md\n{BANNER}\n"
    "# Security\nNever commit secrets.\n\n"
    f"{BANNER}\n.claude/skills/lint-fix/SKILL.md\n{BANNER}\n"
    "---\nname: lint-fix\ndescription: Fix lint errors\n---\nRun the linter.\n"
)


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def pasted_file(tmp_path: Path) -> Path:
    """A text file holding two banner-delimited configuration files."""
    path = tmp_path / "pasted.txt"
    path.write_text(PASTED_CONFIG)
    return path


@pytest.fixture
def complete_file(tmp_path: Path, complete_config_text: str) -> Path:
    """A repository dump with no configuration gaps."""
    path = tmp_path / "complete.txt"
    path.write_text(complete_config_text)
    return path


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """A catalog override narrowing the hook events to two."""
    path = tmp_path / "catalog.yaml"
    path.write_text("hook_events: [PreToolUse, Stop]\ncore_hook_events: [Stop]\n")
    return path
