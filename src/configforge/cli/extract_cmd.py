"""``configforge extract <source>`` -- Split pasted text into importable fragments.

Runs the fragment extractor over SOURCE (a file, a directory dump, or ``-``
for stdin) and lists the candidate skills, rules, agents, hooks, contexts,
MCP servers and generic files it found, grouped by category.

Exit Codes:
    0 -- At least one fragment found.
    2 -- No fragments found, or the source could not be read.
"""

from __future__ import annotations

import json
import sys

import click

from configforge.cli.inputs import format_option, load_text
from configforge.extraction import FragmentCategory, extract_fragments, group_by_category


@click.command("extract")
@click.argument("source")
@format_option
@click.option(
    "--category",
    type=click.Choice([c.value for c in FragmentCategory]),
    default=None,
    help="Only list fragments of this category.",
)
def extract_command(source: str, output_format: str, category: str | None) -> None:
    """List candidate configuration fragments found in SOURCE.

    Exit code 0 if any fragment was found, 2 if none.
    """
    fragments = extract_fragments(load_text(source))
    if category is not None:
        fragments = [f for f in fragments if f.category.value == category]
    grouped = group_by_category(fragments)

    if output_format == "json":
        click.echo(json.dumps({
            "fragments": [f.to_dict() for f in fragments],
            "counts": {c.value: len(members) for c, members in grouped.items()},
        }, indent=2))
    else:
        from configforge.cli.output import print_fragments
        print_fragments(grouped)

    sys.exit(0 if fragments else 2)
