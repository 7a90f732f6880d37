"""Rich output formatting helpers for the ConfigForge CLI.

Severity Color Mapping:
    CRITICAL = bold red, HIGH = yellow, MEDIUM = cyan, LOW = green
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from configforge.catalog import Catalog
from configforge.core.gaps import Gap, Severity
from configforge.core.report import AnalysisReport
from configforge.discovery import DetectedState
from configforge.extraction import CandidateFragment, FragmentCategory

_SEVERITY_STYLES: dict[Severity, str] = {
    Severity.CRITICAL: "bold red",
    Severity.HIGH: "yellow",
    Severity.MEDIUM: "cyan",
    Severity.LOW: "green",
}

_BAR_WIDTH = 20

console = Console()


def severity_style(severity: Severity) -> str:
    """Return the Rich style string for a given severity level."""
    return _SEVERITY_STYLES.get(severity, "white")


def _score_style(score: int) -> str:
    if score >= 75:
        return "green"
    if score >= 40:
        return "yellow"
    return "red"


def _bar(score: int) -> Text:
    filled = round(score / 100 * _BAR_WIDTH)
    return Text.assemble(
        ("█" * filled, _score_style(score)),
        ("░" * (_BAR_WIDTH - filled), "dim"),
    )


def _listing(values: tuple[str, ...] | list[str]) -> str:
    return ", ".join(values) if values else "-"


def print_detected_state(state: DetectedState) -> None:
    """Print every detected signal as a two-column table."""
    table = Table(title="Detected Configuration", show_header=True, header_style="bold")
    table.add_column("Signal", style="bold")
    table.add_column("Observed")

    permissions = [
        name for name, present in (
            ("allow", state.permissions_allow),
            ("ask", state.permissions_ask),
            ("deny", state.permissions_deny),
        )
        if present
    ]
    if state.sandbox_mentioned:
        sandbox = "mentioned"
        if state.sandbox_fields:
            sandbox += f" ({_listing(state.sandbox_fields)})"
    else:
        sandbox = "-"

    rows = [
        ("Files", _listing(state.files)),
        ("Rules", _listing(state.rules)),
        ("Rule topics", _listing(state.rule_topics)),
        ("Skills", _listing(state.skills)),
        ("Agents", _listing(state.agents)),
        ("Commands", _listing(state.commands)),
        ("Contexts", _listing(state.contexts)),
        ("Hook events", _listing(state.hook_events)),
        ("Hook mechanisms", _listing(state.hook_mechanisms)),
        ("Permissions", _listing(permissions)),
        ("Sandbox", sandbox),
        ("MCP servers", _listing(state.mcp_servers)),
        ("Languages", _listing(state.languages)),
        ("Frameworks", _listing(state.frameworks)),
        ("Databases", _listing(state.databases)),
        ("Infrastructure", _listing(state.infra)),
    ]
    for label, value in rows:
        table.add_row(label, value)
    console.print(table)


def print_coverage(report: AnalysisReport) -> None:
    """Print per-category coverage bars and the overall score."""
    table = Table(title="Coverage", show_header=True, header_style="bold")
    table.add_column("Category", style="bold")
    table.add_column("Score", justify="right")
    table.add_column("")
    for name, score in report.coverage.categories().items():
        table.add_row(name.capitalize(), str(score), _bar(score))
    overall = report.coverage.overall
    table.add_row(
        Text("Overall", style="bold"),
        Text(str(overall), style=f"bold {_score_style(overall)}"),
        _bar(overall),
    )
    console.print(table)


def print_gaps(gaps: list[Gap], total_checks: int) -> None:
    """Print gaps as a severity-colored table followed by a summary line."""
    if not gaps:
        console.print("[green]No gaps. Configuration passed all checks.[/green]")
        return

    table = Table(title="Gaps", show_header=True, header_style="bold")
    table.add_column("Severity", justify="center")
    table.add_column("Category", style="dim")
    table.add_column("Item", style="bold")
    table.add_column("Remediation")
    for gap in gaps:
        table.add_row(
            Text(gap.severity.name, style=severity_style(gap.severity)),
            gap.category, gap.item, gap.description,
        )
    console.print(table)

    counts = {severity: 0 for severity in sorted(Severity, reverse=True)}
    for gap in gaps:
        counts[gap.severity] += 1
    parts = [f"[bold]{len(gaps)}[/bold] of {total_checks} checks failing"]
    for severity, count in counts.items():
        if count:
            style = severity_style(severity)
            parts.append(f"[{style}]{count} {severity.label}[/{style}]")
    console.print(" | ".join(parts))


def print_report(report: AnalysisReport, gaps: list[Gap]) -> None:
    """Print the full analysis: detected state, coverage, then ``gaps``."""
    print_detected_state(report.state)
    print_coverage(report)
    print_gaps(gaps, report.total_checks)


def print_fragments(grouped: dict[FragmentCategory, list[CandidateFragment]]) -> None:
    """Print one table of candidate fragments per category."""
    if not grouped:
        console.print("[dim]No importable fragments found.[/dim]")
        return

    for category, fragments in grouped.items():
        table = Table(
            title=f"{category.value} ({len(fragments)})",
            show_header=True, header_style="bold",
        )
        table.add_column("Name", style="bold")
        table.add_column("Path")
        table.add_column("Details", style="dim")
        for fragment in fragments:
            details = {
                key: value for key, value in fragment.metadata.items() if key != "name"
            }
            detail_text = "; ".join(f"{key}={value}" for key, value in details.items())
            table.add_row(fragment.name, fragment.inferred_path, detail_text[:80])
        console.print(table)

    total = sum(len(fragments) for fragments in grouped.values())
    console.print(f"[bold]{total}[/bold] fragment(s) in {len(grouped)} category group(s)")


def print_catalog(catalog: Catalog) -> None:
    """Print the active catalog, one panel per table."""
    console.print(Panel("[bold]Active catalog[/bold]", title="ConfigForge"))

    simple = Table(show_header=True, header_style="bold")
    simple.add_column("Catalog", style="bold")
    simple.add_column("Count", justify="right")
    simple.add_column("Entries")
    simple.add_row("Hook events", str(len(catalog.hook_events)), _listing(catalog.hook_events))
    simple.add_row("Hook mechanisms", str(len(catalog.hook_mechanisms)), _listing(catalog.hook_mechanisms))
    simple.add_row("Core hook events", str(len(catalog.core_hook_events)), _listing(catalog.core_hook_events))
    simple.add_row("Permission lists", str(len(catalog.permission_lists)), _listing(catalog.permission_lists))
    simple.add_row(
        "Permission families", str(len(catalog.permission_families)),
        _listing(catalog.permission_families),
    )
    simple.add_row("Sandbox fields", str(len(catalog.sandbox_fields)), _listing(catalog.sandbox_fields))
    simple.add_row(
        "Rule topics", str(len(catalog.rule_topics)),
        _listing([topic.tag for topic in catalog.rule_topics]),
    )
    simple.add_row(
        "MCP servers", str(len(catalog.mcp_servers)),
        _listing([server.id for server in catalog.mcp_servers]),
    )
    for label, table in (
        ("Languages", catalog.languages),
        ("Frameworks", catalog.frameworks),
        ("Databases", catalog.databases),
        ("Infrastructure", catalog.infra),
    ):
        simple.add_row(label, str(len(table)), _listing([entry.tag for entry in table]))
    console.print(simple)

    files = Table(title="File locations", show_header=True, header_style="bold")
    files.add_column("Key", style="bold")
    files.add_column("Path")
    files.add_column("Scope", style="dim")
    for location in catalog.file_locations:
        files.add_row(location.key, location.path, location.scope)
    console.print(files)

    settings = Table(title="Settings fields", show_header=True, header_style="bold")
    settings.add_column("Category", style="bold")
    settings.add_column("Keys")
    for category, keys in catalog.settings_categories().items():
        settings.add_row(category, _listing(keys))
    console.print(settings)

