"""Catalogs: fixed ground truth for configuration discovery.

Submodules:
    models    -- Catalog, FileLocation, KeywordEntry, McpServerEntry, SettingsField
    defaults  -- DEFAULT_CATALOG and the built-in tables it is assembled from
    loader    -- YAML override loading

Usage::

    from configforge.catalog import DEFAULT_CATALOG, load_catalog

    catalog = load_catalog("team-catalog.yaml")
"""

from configforge.catalog.models import (
    Catalog,
    FileLocation,
    KeywordEntry,
    McpServerEntry,
    SettingsField,
)
from configforge.catalog.defaults import DEFAULT_CATALOG
from configforge.catalog.loader import catalog_from_mapping, load_catalog

__all__ = [
    "Catalog",
    "DEFAULT_CATALOG",
    "FileLocation",
    "KeywordEntry",
    "McpServerEntry",
    "SettingsField",
    "catalog_from_mapping",
    "load_catalog",
]
