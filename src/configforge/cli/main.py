"""ConfigForge CLI -- Discover, score and import AI assistant configuration.

Entry point for the ``configforge`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    analyze  -- Detect existing configuration, score coverage, rank gaps.
    extract  -- Split pasted text into importable configuration fragments.
    catalog  -- Show the catalogs detection runs against.

Usage::

    configforge analyze                         # Analyze the current directory
    configforge analyze ./my-project --format json
    configforge analyze repo-dump.txt --sort severity
    pbpaste | configforge extract -
    configforge catalog --catalog team-catalog.yaml
"""

from __future__ import annotations

import click

from configforge import __version__
from configforge.cli.analyze import analyze_command
from configforge.cli.catalog_cmd import catalog_command
from configforge.cli.extract_cmd import extract_command


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """ConfigForge: configuration discovery and gap scoring for AI coding assistants.

    Find the rules, skills, agents, hooks and MCP servers a project already
    has, score how complete they are, and list what is missing.
    """


# Register all subcommands
cli.add_command(analyze_command)
cli.add_command(extract_command)
cli.add_command(catalog_command)
