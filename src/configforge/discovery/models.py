"""DetectedState: the structured snapshot produced by the signal detector.

A DetectedState has no identity of its own. It is recomputed from the input
text and the catalog on every call, and every collection is a tuple in a
deterministic order (catalog order for catalog-driven signals, first-seen
order for identifiers found in the text). A missing signal means "not
observed", never "known to be absent".
"""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class DetectedState:
    """Configuration signals observed in one input text.

    Attributes:
        files: Keys of catalog file locations observed, in catalog order.
        rules: Rule identifiers (e.g., "security", "frontend/react").
        skills: Skill identifiers (the directory holding SKILL.md).
        agents: Agent identifiers.
        commands: Slash-command identifiers.
        contexts: Context file identifiers.
        rule_topics: Catalog rule topics matched by the rule identifiers.
        hook_events: Canonical hook event names observed.
        hook_mechanisms: Hook handler kinds observed (command, prompt, agent).
        permissions_allow: An ``allow`` permission list was observed.
        permissions_ask: An ``ask`` permission list was observed.
        permissions_deny: A ``deny`` permission list was observed.
        sandbox_mentioned: The token "sandbox" appears anywhere.
        sandbox_fields: Sandbox sub-fields observed (only when mentioned).
        mcp_servers: Registry MCP server ids observed.
        languages: Detected language tags.
        frameworks: Detected framework tags.
        databases: Detected database tags.
        infra: Detected infrastructure tags.
    """

    files: tuple[str, ...] = ()
    rules: tuple[str, ...] = ()
    skills: tuple[str, ...] = ()
    agents: tuple[str, ...] = ()
    commands: tuple[str, ...] = ()
    contexts: tuple[str, ...] = ()
    rule_topics: tuple[str, ...] = ()
    hook_events: tuple[str, ...] = ()
    hook_mechanisms: tuple[str, ...] = ()
    permissions_allow: bool = False
    permissions_ask: bool = False
    permissions_deny: bool = False
    sandbox_mentioned: bool = False
    sandbox_fields: tuple[str, ...] = ()
    mcp_servers: tuple[str, ...] = ()
    languages: tuple[str, ...] = ()
    frameworks: tuple[str, ...] = ()
    databases: tuple[str, ...] = ()
    infra: tuple[str, ...] = ()

    def has_file(self, key: str) -> bool:
        """Return True if the catalog file location ``key`` was observed."""
        return key in self.files

    @property
    def has_project_instructions(self) -> bool:
        return self.has_file("project_instructions")

    @property
    def has_settings(self) -> bool:
        return self.has_file("settings")

    @property
    def has_local_settings(self) -> bool:
        return self.has_file("local_settings")

    @property
    def has_mcp_config(self) -> bool:
        return self.has_file("mcp_config")

    @property
    def has_plugin_manifest(self) -> bool:
        return self.has_file("plugin_manifest")

    @property
    def has_global_instructions(self) -> bool:
        return self.has_file("global_instructions")

    @property
    def has_global_settings(self) -> bool:
        return self.has_file("global_settings")

    @property
    def permission_count(self) -> int:
        """Number of permission lists (allow, ask, deny) observed."""
        return sum((self.permissions_allow, self.permissions_ask, self.permissions_deny))

    def to_dict(self) -> dict:
        """Return a JSON-serializable view with lists in place of tuples."""
        return {
            key: list(value) if isinstance(value, tuple) else value
            for key, value in asdict(self).items()
        }
