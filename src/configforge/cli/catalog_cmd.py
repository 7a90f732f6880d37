"""``configforge catalog`` -- Show the catalogs detection runs against.

Prints the built-in catalogs, or the result of applying ``--catalog``
overrides, so override files can be checked before use.

Exit Codes:
    0 -- Catalog printed.
    2 -- The catalog file could not be loaded.
"""

from __future__ import annotations

import dataclasses
import json

import click

from configforge.cli.inputs import catalog_option, format_option, load_active_catalog


@click.command("catalog")
@format_option
@catalog_option
def catalog_command(output_format: str, catalog_path: str | None) -> None:
    """Print the active catalogs."""
    catalog = load_active_catalog(catalog_path)
    if output_format == "json":
        click.echo(json.dumps(dataclasses.asdict(catalog), indent=2))
    else:
        from configforge.cli.output import print_catalog
        print_catalog(catalog)
