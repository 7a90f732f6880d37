"""Catalog data types: the fixed ground truth the engine matches against.

Every catalog entry is a frozen dataclass holding tuples, so a ``Catalog``
can be shared freely between calls. The engine never reaches for a global
catalog; callers pass one in (``DEFAULT_CATALOG`` unless overridden).
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields


@dataclass(frozen=True)
class KeywordEntry:
    """A canonical identifier recognised by any of several keywords.

    Used for stack synonym tables (``"pyproject.toml"`` -> ``python``), rule
    topics and similar keyword-to-tag mappings.

    Attributes:
        tag: Canonical identifier reported when a keyword matches.
        keywords: Case-folded substrings that signal the tag.
    """

    tag: str
    keywords: tuple[str, ...]


@dataclass(frozen=True)
class FileLocation:
    """A canonical configuration file or directory location.

    Attributes:
        key: Stable machine identifier (e.g., "project_instructions").
        path: Display path (e.g., "CLAUDE.md").
        keywords: Case-folded substrings that signal the location.
        scope: One of "project", "local", "global", "managed".
    """

    key: str
    path: str
    keywords: tuple[str, ...]
    scope: str = "project"


@dataclass(frozen=True)
class McpServerEntry:
    """A well-known MCP server in the registry.

    Attributes:
        id: Server identifier (e.g., "github").
        keywords: Case-folded substrings that signal the server.
        description: One-line summary for reports.
    """

    id: str
    keywords: tuple[str, ...]
    description: str = ""


@dataclass(frozen=True)
class SettingsField:
    """A known settings-file key and the category it belongs to."""

    key: str
    category: str


@dataclass(frozen=True)
class Catalog:
    """Complete set of catalogs consumed by the detector, scorer and ranker.

    Attributes:
        hook_events: Canonical hook event names.
        hook_mechanisms: Hook handler kinds (the ``type`` discriminator).
        permission_lists: Permission list names (allow, ask, deny).
        permission_families: Tool families permission rules are written for.
        settings_fields: Known settings keys grouped by category.
        sandbox_fields: Known sandbox sub-field names.
        rule_topics: Rule topics, each recognised by keywords in rule names.
        file_locations: Canonical file/location list, scope-tagged.
        languages: Language synonym table.
        frameworks: Framework synonym table.
        databases: Database synonym table.
        infra: Infrastructure synonym table.
        mcp_servers: MCP server registry.
        core_hook_events: Hook events required for adequate hook coverage.
    """

    hook_events: tuple[str, ...]
    hook_mechanisms: tuple[str, ...]
    permission_lists: tuple[str, ...]
    permission_families: tuple[str, ...]
    settings_fields: tuple[SettingsField, ...]
    sandbox_fields: tuple[str, ...]
    rule_topics: tuple[KeywordEntry, ...]
    file_locations: tuple[FileLocation, ...]
    languages: tuple[KeywordEntry, ...]
    frameworks: tuple[KeywordEntry, ...]
    databases: tuple[KeywordEntry, ...]
    infra: tuple[KeywordEntry, ...]
    mcp_servers: tuple[McpServerEntry, ...]
    core_hook_events: tuple[str, ...] = field(default=())

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Return the names of all catalog fields, in declaration order."""
        return tuple(f.name for f in fields(cls))

    def file_location(self, key: str) -> FileLocation | None:
        """Look up a file location by key, or None if the catalog lacks it."""
        for location in self.file_locations:
            if location.key == key:
                return location
        return None

    def settings_categories(self) -> dict[str, list[str]]:
        """Group settings keys by category, preserving catalog order."""
        grouped: dict[str, list[str]] = {}
        for setting in self.settings_fields:
            grouped.setdefault(setting.category, []).append(setting.key)
        return grouped
