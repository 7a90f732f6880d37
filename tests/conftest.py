"""Shared fixtures for configforge tests."""

from __future__ import annotations

import pathlib

import pytest

BANNER = "=" * 60

SETTINGS_JSON = """\
{
  "permissions": {
    "allow": ["Bash(npm run test:*)"],
    "ask": ["Bash(git push:*)"],
    "deny": ["Read(./.env)"]
  },
  "sandbox": {
    "enabled": true,
    "network": {"allowedDomains": ["github.com"]}
  },
  "hooks": {
    "PreToolUse": [{"matcher": "Bash", "hooks": [{"type": "command", "command": "./scripts/guard.sh"}]}],
    "PostToolUse": [{"matcher": "Edit", "hooks": [{"type": "command", "command": "ruff format"}]}],
    "UserPromptSubmit": [{"hooks": [{"type": "command", "command": "./scripts/context.sh"}]}],
    "Stop": [{"hooks": [{"type": "command", "command": "make check"}]}],
    "Notification": [{"hooks": [{"type": "command", "command": "notify-send done"}]}],
    "SessionStart": [{"hooks": [{"type": "command", "command": "cat NOTES.md"}]}],
    "SessionEnd": [{"hooks": [{"type": "command", "command": "./scripts/save.sh"}]}],
    "PreCompact": [{"hooks": [{"type": "command", "command": "./scripts/summary.sh"}]}],
    "SubagentStop": [{"hooks": [{"type": "command", "command": "./scripts/verify.sh"}]}]
  }
}"""

MCP_JSON = """\
{
  "mcpServers": {
    "github": {"command": "npx", "args": ["-y", "@modelcontextprotocol/server-github"]},
    "docs": {"type": "http", "url": "https://mcp.context7.com/mcp"}
  }
}"""


def _section(path: str, body: str) -> str:
    return f"{BANNER}\n{path}\n{BANNER}\n{body}\n"


@pytest.fixture
def complete_config_text() -> str:
    """A repository dump that satisfies every structural gap check."""
    tree = "\n".join([
        "# File tree",
        "CLAUDE.md",
        ".claude/settings.json",
        ".claude/settings.local.json",
        ".mcp.json",
        ".claude/rules/security.md",
        ".claude/rules/testing.md",
        ".claude/skills/lint-fix/SKILL.md",
        ".claude/agents/reviewer.md",
        ".claude/commands/release.md",
    ])
    return "\n\n".join([
        tree,
        _section("CLAUDE.md", "# Project\nUse pnpm for scripts."),
        _section(".claude/settings.json", SETTINGS_JSON),
        _section(".mcp.json", MCP_JSON),
        _section(".claude/rules/security.md", "# Security\nNever commit secrets."),
        _section(".claude/rules/testing.md", "# Testing\nWrite a failing test first."),
        _section(
            ".claude/skills/lint-fix/SKILL.md",
            "---\nname: lint-fix\ndescription: Fix lint errors\n---\nRun the linter and fix.",
        ),
        _section(
            ".claude/agents/reviewer.md",
            "---\nname: reviewer\ndescription: Reviews diffs\ntools: Read, Grep\n---\nReview carefully.",
        ),
    ])


@pytest.fixture
def project_dir(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create a small project directory with a handful of configuration files."""
    (tmp_path / "CLAUDE.md").write_text("# Project\nRun `make check` before pushing.\n")
    claude = tmp_path / ".claude"
    (claude / "rules").mkdir(parents=True)
    (claude / "rules" / "security.md").write_text("# Security\nNo secrets in code.\n")
    (claude / "settings.json").write_text(SETTINGS_JSON)
    (tmp_path / "pyproject.toml").write_text("[project]\nname = \"demo\"\n")
    src = tmp_path / "src"
    src.mkdir()
    (src / "app.py").write_text("print('hello')\n")
    return tmp_path


@pytest.fixture
def empty_dir(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create an empty directory."""
    empty = tmp_path / "empty"
    empty.mkdir()
    return empty
