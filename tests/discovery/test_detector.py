"""Tests for the signal detector.

Verifies:
    - File location detection by keyword.
    - Identifier extraction for rules, skills, agents, commands, contexts.
    - Hook event and mechanism detection.
    - Permission list and sandbox detection.
    - MCP server and stack detection.
    - Catalog injection.
"""

from __future__ import annotations

import dataclasses

from configforge.catalog import DEFAULT_CATALOG, KeywordEntry
from configforge.discovery import DetectedState, SignalDetector, detect


class TestEmptyInput:
    """An empty string observes nothing."""

    def test_empty_string_gives_default_state(self) -> None:
        assert detect("") == DetectedState()

    def test_irrelevant_prose_gives_default_state(self) -> None:
        assert detect("The quick brown fox jumps over the lazy dog.") == DetectedState()


class TestFileDetection:
    """Tests for canonical file location keywords."""

    def test_project_instructions_case_insensitive(self) -> None:
        state = detect("see Claude.MD for details")
        assert state.has_project_instructions

    def test_settings_and_local_settings(self) -> None:
        state = detect(".claude/settings.json\n.claude/settings.local.json")
        assert state.has_settings
        assert state.has_local_settings

    def test_local_settings_alone_is_not_shared_settings(self) -> None:
        state = detect(".claude/settings.local.json")
        assert state.has_local_settings
        assert not state.has_settings

    def test_mcp_config_and_plugin_manifest(self) -> None:
        state = detect(".mcp.json\n.claude-plugin/plugin.json")
        assert state.has_mcp_config
        assert state.has_plugin_manifest

    def test_files_follow_catalog_order(self) -> None:
        state = detect(".mcp.json\nCLAUDE.md")
        assert state.files == ("project_instructions", "mcp_config")

    def test_global_instructions(self) -> None:
        assert detect("~/.claude/CLAUDE.md").has_global_instructions


class TestIdentifierLists:
    """Tests for path-shaped identifier extraction."""

    def test_rules_including_nested(self) -> None:
        state = detect(".claude/rules/security.md\n.claude/rules/frontend/react.md")
        assert state.rules == ("security", "frontend/react")

    def test_rules_are_deduplicated_in_first_seen_order(self) -> None:
        text = "rules/testing.md rules/security.md rules/testing.md"
        assert detect(text).rules == ("testing", "security")

    def test_skill_directory_name(self) -> None:
        state = detect(".claude/skills/lint-fix/SKILL.md")
        assert state.skills == ("lint-fix",)

    def test_skill_identifier_keeps_original_case(self) -> None:
        assert detect("skills/DeployHelper/skill.md").skills == ("DeployHelper",)

    def test_agents_commands_contexts(self) -> None:
        state = detect(
            ".claude/agents/reviewer.md\n"
            ".claude/commands/git/release.md\n"
            ".claude/contexts/research.md\n"
        )
        assert state.agents == ("reviewer",)
        assert state.commands == ("git/release",)
        assert state.contexts == ("research",)

    def test_rule_topics_from_rule_names(self) -> None:
        state = detect("rules/security-baseline.md rules/unit-tests.md")
        assert state.rule_topics == ("security", "testing")


class TestHookDetection:
    """Tests for hook events and mechanisms."""

    def test_events_in_catalog_order(self) -> None:
        state = detect('"SessionStart": [], "PreToolUse": []')
        assert state.hook_events == ("PreToolUse", "SessionStart")

    def test_event_match_is_case_insensitive(self) -> None:
        assert detect("pretooluse").hook_events == ("PreToolUse",)

    def test_event_requires_whole_token(self) -> None:
        state = detect('"SubagentStop": []')
        assert state.hook_events == ("SubagentStop",)

    def test_json_mechanism(self) -> None:
        state = detect('{"type": "command", "command": "ruff"}')
        assert state.hook_mechanisms == ("command",)

    def test_colon_style_mechanism(self) -> None:
        state = detect("hooks:\n  - type: prompt\n  - type: 'agent'\n")
        assert state.hook_mechanisms == ("prompt", "agent")


class TestPermissionDetection:
    """Tests for permission list detection."""

    def test_json_lists(self) -> None:
        state = detect('"permissions": {"allow": [], "deny": []}')
        assert state.permissions_allow
        assert state.permissions_deny
        assert not state.permissions_ask
        assert state.permission_count == 2

    def test_colon_style_list(self) -> None:
        assert detect("permissions:\n  ask:\n    - Bash(git push:*)").permissions_ask

    def test_bare_word_without_colon_does_not_count(self) -> None:
        assert detect("we deny nothing").permission_count == 0

    def test_bare_colon_in_prose_counts(self) -> None:
        assert detect("Policy deny: production writes").permissions_deny


class TestSandboxDetection:
    """Tests for sandbox mention and sub-fields."""

    def test_mention_without_fields(self) -> None:
        state = detect("we use a sandbox")
        assert state.sandbox_mentioned
        assert state.sandbox_fields == ()

    def test_fields_recorded_when_mentioned(self) -> None:
        state = detect('"sandbox": {"enabled": true, "excludedCommands": ["docker"]}')
        assert state.sandbox_fields == ("enabled", "excludedCommands")

    def test_fields_ignored_without_mention(self) -> None:
        state = detect('"enabled": true, "network": {}')
        assert not state.sandbox_mentioned
        assert state.sandbox_fields == ()


class TestRegistryDetection:
    """Tests for MCP server and stack tables."""

    def test_mcp_servers_from_package_names(self) -> None:
        state = detect("npx -y @modelcontextprotocol/server-github\nnpx @upstash/context7-mcp")
        assert state.mcp_servers == ("github", "context7")

    def test_stack_tables(self) -> None:
        state = detect("pyproject.toml\nfrom fastapi import FastAPI\nREDIS_URL=redis://\nDockerfile")
        assert "python" in state.languages
        assert "fastapi" in state.frameworks
        assert "redis" in state.databases
        assert "docker" in state.infra


class TestCatalogInjection:
    """The detector uses only the catalog it is given."""

    def test_restricted_hook_events(self) -> None:
        catalog = dataclasses.replace(DEFAULT_CATALOG, hook_events=("Stop",))
        state = SignalDetector(catalog).detect('"PreToolUse": [], "Stop": []')
        assert state.hook_events == ("Stop",)

    def test_custom_language_entry(self) -> None:
        catalog = dataclasses.replace(
            DEFAULT_CATALOG,
            languages=(KeywordEntry("elixir", ("mix.exs",)),),
        )
        assert detect("mix.exs", catalog).languages == ("elixir",)

    def test_detector_instance_is_reusable(self) -> None:
        detector = SignalDetector()
        first = detector.detect("CLAUDE.md")
        detector.detect(".mcp.json")
        assert detector.detect("CLAUDE.md") == first


class TestToDict:
    """Tests for DetectedState.to_dict()."""

    def test_tuples_become_lists(self) -> None:
        data = detect("rules/security.md").to_dict()
        assert data["rules"] == ["security"]
        assert data["permissions_allow"] is False
