"""The ordered catalog of structural gap checks.

Each ``GapCheck`` pairs an identifier with an ``evaluate(state, catalog)``
function returning a ``Gap`` when the check fails and ``None`` when it
passes. ``GAP_CHECKS`` fixes the evaluation order, grouped as
files -> hooks -> lifecycle -> permissions -> sandbox -> rules; the ranker
reports gaps in this order.

Most checks are plain presence tests built with ``_presence_check``. The
hook coverage check is threshold-based: no events at all is critical,
missing core events is high (and names them), otherwise it passes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from configforge.catalog import Catalog
from configforge.core.gaps.models import Gap, Severity
from configforge.discovery.models import DetectedState

Evaluator = Callable[[DetectedState, Catalog], "Gap | None"]


@dataclass(frozen=True)
class GapCheck:
    """A single structural predicate over a DetectedState.

    Attributes:
        check_id: Stable identifier, also carried by the Gap it emits.
        category: Check group.
        evaluate: Returns a Gap when the predicate fails, None when it holds.
    """

    check_id: str
    category: str
    evaluate: Evaluator


def _presence_check(
    check_id: str,
    category: str,
    severity: Severity,
    item: str,
    description: str,
    passes: Callable[[DetectedState], bool],
) -> GapCheck:
    """Build a check that emits one fixed Gap whenever ``passes`` is False."""

    def evaluate(state: DetectedState, catalog: Catalog) -> Gap | None:
        if passes(state):
            return None
        return Gap(
            check_id=check_id,
            category=category,
            severity=severity,
            item=item,
            description=description,
        )

    return GapCheck(check_id=check_id, category=category, evaluate=evaluate)


def _file_check(
    check_id: str,
    key: str,
    severity: Severity,
    default_path: str,
    description: str,
) -> GapCheck:
    """Presence check for a catalog file location, named by its catalog path."""

    def evaluate(state: DetectedState, catalog: Catalog) -> Gap | None:
        if state.has_file(key):
            return None
        location = catalog.file_location(key)
        path = location.path if location is not None else default_path
        return Gap(
            check_id=check_id,
            category="files",
            severity=severity,
            item=path,
            description=description.format(path=path),
        )

    return GapCheck(check_id=check_id, category="files", evaluate=evaluate)


def _evaluate_hook_coverage(state: DetectedState, catalog: Catalog) -> Gap | None:
    if not state.hook_events:
        return Gap(
            check_id="hooks.coverage",
            category="hooks",
            severity=Severity.CRITICAL,
            item="hooks",
            description=(
                "No hook events are configured. Add hooks for "
                f"{', '.join(catalog.core_hook_events)} to enforce checks "
                "around tool use and at the end of each turn."
            ),
        )
    missing = [e for e in catalog.core_hook_events if e not in state.hook_events]
    if not missing:
        return None
    return Gap(
        check_id="hooks.coverage",
        category="hooks",
        severity=Severity.HIGH,
        item="hooks",
        description=f"Hook coverage is partial. Missing events: {', '.join(missing)}.",
    )


def _lifecycle_check(event: str, slug: str, severity: Severity, purpose: str) -> GapCheck:
    return _presence_check(
        f"lifecycle.{slug}",
        "lifecycle",
        severity,
        event,
        f"No {event} hook. Add one to {purpose}.",
        lambda state: event in state.hook_events,
    )


def _sandbox_field_check(name: str, severity: Severity, purpose: str) -> GapCheck:
    return _presence_check(
        f"sandbox.{name.lower()}",
        "sandbox",
        severity,
        f"sandbox.{name}",
        f"Sandbox setting '{name}' not found. Set it to {purpose}.",
        lambda state: name in state.sandbox_fields,
    )


def _rule_topic_check(topic: str, severity: Severity, purpose: str) -> GapCheck:
    return _presence_check(
        f"rules.{topic}",
        "rules",
        severity,
        f"rules/{topic}.md",
        f"No {topic} rule. Add rules/{topic}.md covering {purpose}.",
        lambda state: topic in state.rule_topics,
    )


GAP_CHECKS: tuple[GapCheck, ...] = (
    # -- Files --
    _file_check(
        "files.project-instructions", "project_instructions", Severity.CRITICAL,
        "CLAUDE.md",
        "No project instructions file. Create {path} describing the stack, "
        "commands and conventions.",
    ),
    _file_check(
        "files.settings", "settings", Severity.HIGH,
        ".claude/settings.json",
        "No shared project settings. Create {path} to hold permissions, hooks "
        "and sandbox settings.",
    ),
    _file_check(
        "files.mcp-config", "mcp_config", Severity.MEDIUM,
        ".mcp.json",
        "No project MCP configuration. Add {path} to share MCP servers with "
        "the team.",
    ),
    _file_check(
        "files.local-settings", "local_settings", Severity.LOW,
        ".claude/settings.local.json",
        "No local override settings. Add {path} (git-ignored) for personal "
        "overrides.",
    ),
    _presence_check(
        "files.skills", "files", Severity.MEDIUM, ".claude/skills/",
        "No skills found. Package repeatable workflows as "
        ".claude/skills/<name>/SKILL.md.",
        lambda state: bool(state.skills),
    ),
    _presence_check(
        "files.agents", "files", Severity.LOW, ".claude/agents/",
        "No subagents found. Add focused agents under .claude/agents/.",
        lambda state: bool(state.agents),
    ),
    _presence_check(
        "files.commands", "files", Severity.LOW, ".claude/commands/",
        "No slash commands found. Add frequent prompts under .claude/commands/.",
        lambda state: bool(state.commands),
    ),
    # -- Hooks --
    GapCheck("hooks.coverage", "hooks", _evaluate_hook_coverage),
    _presence_check(
        "hooks.command-mechanism", "hooks", Severity.MEDIUM, "command hooks",
        'No command-type hook handlers ("type": "command"). Deterministic '
        "checks such as formatters and linters need command hooks.",
        lambda state: "command" in state.hook_mechanisms,
    ),
    # -- Lifecycle hooks --
    _lifecycle_check("SessionStart", "session-start", Severity.MEDIUM,
                     "load project context when a session begins"),
    _lifecycle_check("SessionEnd", "session-end", Severity.LOW,
                     "clean up or record state when a session ends"),
    _lifecycle_check("PreCompact", "pre-compact", Severity.MEDIUM,
                     "preserve key context before the conversation is compacted"),
    _lifecycle_check("SubagentStop", "subagent-stop", Severity.LOW,
                     "validate subagent results before they are used"),
    # -- Permissions --
    _presence_check(
        "permissions.deny", "permissions", Severity.HIGH, "permissions.deny",
        "No deny list. Block reads of secrets (.env, credentials) and "
        "destructive commands.",
        lambda state: state.permissions_deny,
    ),
    _presence_check(
        "permissions.allow", "permissions", Severity.MEDIUM, "permissions.allow",
        "No allow list. Pre-approve safe, frequent commands to cut prompts.",
        lambda state: state.permissions_allow,
    ),
    _presence_check(
        "permissions.ask", "permissions", Severity.LOW, "permissions.ask",
        "No ask list. Require confirmation for risky but legitimate actions "
        "such as pushes and deploys.",
        lambda state: state.permissions_ask,
    ),
    # -- Sandbox --
    _presence_check(
        "sandbox.configured", "sandbox", Severity.HIGH, "sandbox",
        "Sandboxing is not configured. Add a sandbox block to settings to "
        "isolate shell commands.",
        lambda state: state.sandbox_mentioned,
    ),
    _sandbox_field_check("enabled", Severity.MEDIUM, "true so shell commands run sandboxed"),
    _sandbox_field_check("network", Severity.LOW, "restrict outbound network access"),
    # -- Rules --
    _presence_check(
        "rules.present", "rules", Severity.HIGH, ".claude/rules/",
        "No rule files found. Split standing instructions into "
        ".claude/rules/<topic>.md.",
        lambda state: bool(state.rules),
    ),
    _rule_topic_check("security", Severity.HIGH, "secrets, input validation and authentication"),
    _rule_topic_check("testing", Severity.MEDIUM, "how tests are written and run"),
)
