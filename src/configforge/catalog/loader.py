"""Load catalog overrides from a YAML file.

An override file is a YAML mapping whose keys are ``Catalog`` field names.
Each key present replaces the corresponding default wholesale; keys not
present keep their defaults. Example::

    hook_events: [PreToolUse, PostToolUse, Stop]
    mcp_servers:
      - id: internal-wiki
        keywords: [wiki-mcp]
        description: Company wiki search
    languages:
      - tag: elixir
        keywords: [mix.exs, elixir]

Keywords are case-folded on load so override files can be written in any
case.
"""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Any

import yaml

from configforge.catalog.defaults import DEFAULT_CATALOG
from configforge.catalog.models import (
    Catalog,
    FileLocation,
    KeywordEntry,
    McpServerEntry,
    SettingsField,
)
from configforge.exceptions import CatalogError

_STRING_LIST_FIELDS = frozenset({
    "hook_events",
    "hook_mechanisms",
    "permission_lists",
    "permission_families",
    "sandbox_fields",
    "core_hook_events",
})

FILE_SCOPES = frozenset({"project", "local", "global", "managed"})

_KEYWORD_TABLE_FIELDS = frozenset({
    "rule_topics",
    "languages",
    "frameworks",
    "databases",
    "infra",
})


def _string_list(name: str, value: Any) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise CatalogError(f"Catalog field '{name}' must be a list of strings")
    return tuple(value)


def _keywords(name: str, entry: dict) -> tuple[str, ...]:
    keywords = entry.get("keywords")
    if not isinstance(keywords, list) or not keywords:
        raise CatalogError(f"Entries of '{name}' need a non-empty 'keywords' list")
    return tuple(str(k).casefold() for k in keywords)


def _scope(entry: dict) -> str:
    scope = str(entry.get("scope", "project"))
    if scope not in FILE_SCOPES:
        raise CatalogError(
            f"Unknown file location scope '{scope}'; expected one of: "
            f"{', '.join(sorted(FILE_SCOPES))}"
        )
    return scope


def _entry_list(name: str, value: Any) -> list[dict]:
    if not isinstance(value, list) or not all(isinstance(v, dict) for v in value):
        raise CatalogError(f"Catalog field '{name}' must be a list of mappings")
    return value


def _build_field(name: str, value: Any) -> tuple:
    """Convert one raw YAML value into the typed catalog field."""
    if name in _STRING_LIST_FIELDS:
        return _string_list(name, value)

    entries = _entry_list(name, value)
    try:
        if name in _KEYWORD_TABLE_FIELDS:
            return tuple(
                KeywordEntry(tag=str(e["tag"]), keywords=_keywords(name, e))
                for e in entries
            )
        if name == "mcp_servers":
            return tuple(
                McpServerEntry(
                    id=str(e["id"]),
                    keywords=_keywords(name, e),
                    description=str(e.get("description", "")),
                )
                for e in entries
            )
        if name == "file_locations":
            return tuple(
                FileLocation(
                    key=str(e["key"]),
                    path=str(e["path"]),
                    keywords=_keywords(name, e),
                    scope=_scope(e),
                )
                for e in entries
            )
        if name == "settings_fields":
            return tuple(
                SettingsField(key=str(e["key"]), category=str(e["category"]))
                for e in entries
            )
    except KeyError as exc:
        raise CatalogError(f"Entry in '{name}' is missing required key {exc}") from exc
    raise CatalogError(f"Unknown catalog field: '{name}'")


def catalog_from_mapping(data: dict, base: Catalog = DEFAULT_CATALOG) -> Catalog:
    """Apply a mapping of overrides on top of a base catalog.

    Args:
        data: Raw mapping (as parsed from YAML).
        base: Catalog supplying every field the mapping does not override.

    Returns:
        A new ``Catalog``; ``base`` is left untouched.

    Raises:
        CatalogError: If a key is unknown or a value has the wrong shape.
    """
    known = set(Catalog.field_names())
    overrides: dict[str, tuple] = {}
    for name, value in data.items():
        if name not in known:
            raise CatalogError(f"Unknown catalog field: '{name}'")
        overrides[name] = _build_field(name, value)
    return dataclasses.replace(base, **overrides)


def load_catalog(path: Path | str | None = None) -> Catalog:
    """Load a catalog, applying the overrides in ``path`` when given.

    Args:
        path: YAML override file. None returns ``DEFAULT_CATALOG``.

    Returns:
        The resulting ``Catalog``.

    Raises:
        CatalogError: If the file cannot be read, is not valid YAML, or
            contains unknown or malformed fields.
    """
    if path is None:
        return DEFAULT_CATALOG

    catalog_path = Path(path)
    try:
        raw = catalog_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogError(f"Cannot read catalog file {catalog_path}: {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise CatalogError(f"Invalid YAML in catalog file {catalog_path}: {exc}") from exc

    if data is None:
        return DEFAULT_CATALOG
    if not isinstance(data, dict):
        raise CatalogError(f"Catalog file {catalog_path} must contain a mapping")
    return catalog_from_mapping(data)
