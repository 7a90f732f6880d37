"""Gap ranker: evaluate every structural check against a DetectedState.

The ranker is a pure, total function. Every check in ``GAP_CHECKS`` either
passes (nothing emitted) or fails (exactly one Gap emitted), so for any
state::

    len(rank_gaps(state)) + passing checks == len(GAP_CHECKS)

Gaps come back in evaluation order. Callers wanting the worst first use
``sort_by_severity()``, a stable sort that keeps evaluation order within a
severity tier.
"""

from __future__ import annotations

from configforge.catalog import DEFAULT_CATALOG, Catalog
from configforge.core.gaps.checks import GAP_CHECKS, GapCheck
from configforge.core.gaps.models import Gap, Severity
from configforge.discovery.models import DetectedState


def evaluate_checks(
    state: DetectedState,
    catalog: Catalog = DEFAULT_CATALOG,
    checks: tuple[GapCheck, ...] = GAP_CHECKS,
) -> list[tuple[GapCheck, Gap | None]]:
    """Evaluate each check and pair it with its outcome.

    Returns:
        One ``(check, gap_or_none)`` pair per check, in check order.
    """
    return [(check, check.evaluate(state, catalog)) for check in checks]


def rank_gaps(
    state: DetectedState,
    catalog: Catalog = DEFAULT_CATALOG,
    checks: tuple[GapCheck, ...] = GAP_CHECKS,
) -> list[Gap]:
    """Return one Gap per failing check, in evaluation order.

    Args:
        state: Signals from the detector.
        catalog: Catalog used for paths and core hook events in gap text.
        checks: Checks to evaluate; ``GAP_CHECKS`` by default.
    """
    return [gap for _, gap in evaluate_checks(state, catalog, checks) if gap is not None]


def sort_by_severity(gaps: list[Gap]) -> list[Gap]:
    """Stable sort with the most severe gaps first."""
    return sorted(gaps, key=lambda gap: gap.severity, reverse=True)


def filter_by_severity(gaps: list[Gap], threshold: Severity) -> list[Gap]:
    """Keep only gaps at or above ``threshold``."""
    return [gap for gap in gaps if gap.severity >= threshold]
