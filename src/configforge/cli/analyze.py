"""``configforge analyze [source]`` -- Detect, score and rank existing configuration.

SOURCE may be a project directory (tree and key files are read), a single
text file such as a repository dump, or ``-`` for stdin. Defaults to the
current directory.

Exit Codes:
    0 -- No gaps at or above the severity threshold.
    1 -- One or more gaps at or above the severity threshold.
    2 -- The source or catalog file could not be read.
"""

from __future__ import annotations

import json
import sys

import click

from configforge.cli.inputs import catalog_option, format_option, load_active_catalog, load_text
from configforge.core.gaps import Severity, filter_by_severity, sort_by_severity
from configforge.core.report import analyze_text


@click.command("analyze")
@click.argument("source", required=False, default=".")
@format_option
@catalog_option
@click.option(
    "--severity-threshold",
    type=click.Choice(["low", "medium", "high", "critical"]),
    default="low",
    help="Minimum gap severity to report (default: low).",
)
@click.option(
    "--sort", "sort_order",
    type=click.Choice(["check", "severity"]),
    default="check",
    help="Order gaps by check order (default) or severity, most severe first.",
)
def analyze_command(
    source: str,
    output_format: str,
    catalog_path: str | None,
    severity_threshold: str,
    sort_order: str,
) -> None:
    """Report existing configuration, coverage scores and ranked gaps.

    Exit code 0 if no gaps at or above the threshold remain, 1 otherwise.
    """
    catalog = load_active_catalog(catalog_path)
    text = load_text(source)
    report = analyze_text(text, catalog)

    gaps = filter_by_severity(report.gaps, Severity.from_label(severity_threshold))
    if sort_order == "severity":
        gaps = sort_by_severity(gaps)

    if output_format == "json":
        data = report.to_dict()
        data["gaps"] = [gap.to_dict() for gap in gaps]
        click.echo(json.dumps(data, indent=2))
    else:
        from configforge.cli.output import print_report
        print_report(report, gaps)

    sys.exit(1 if gaps else 0)
