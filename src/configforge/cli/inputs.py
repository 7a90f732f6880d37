"""Shared input loading for CLI commands.

Commands read their text and catalog through ``load_text`` and
``load_active_catalog`` so that every command reports unreadable sources and
malformed catalog files the same way: a message on stderr and exit code 2.
"""

from __future__ import annotations

import sys

import click

from configforge.catalog import Catalog, load_catalog
from configforge.exceptions import ConfigForgeError
from configforge.sources import read_source


def load_text(source: str) -> str:
    """Read ``source`` (path or ``-``), exiting with code 2 on failure."""
    try:
        return read_source(source)
    except ConfigForgeError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)


def load_active_catalog(catalog_path: str | None) -> Catalog:
    """Load the catalog override file (if any), exiting with code 2 on failure."""
    try:
        return load_catalog(catalog_path)
    except ConfigForgeError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)


catalog_option = click.option(
    "--catalog", "catalog_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML file overriding the built-in catalogs.",
)

format_option = click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
