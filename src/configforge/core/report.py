"""One-call analysis: detect, score and rank a text blob.

``analyze_text`` is the engine's front door for callers that want the whole
report: it runs the detector once and feeds the resulting state to both the
coverage scorer and the gap ranker.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from configforge.catalog import DEFAULT_CATALOG, Catalog
from configforge.core.coverage import CoverageScore, score_coverage
from configforge.core.gaps import GAP_CHECKS, Gap, rank_gaps
from configforge.discovery import DetectedState, SignalDetector


@dataclass(frozen=True)
class AnalysisReport:
    """Detector, scorer and ranker output for one input.

    Attributes:
        state: Signals observed in the input.
        coverage: Per-category completeness.
        gaps: Failing checks, in evaluation order.
        total_checks: Number of checks evaluated.
    """

    state: DetectedState
    coverage: CoverageScore
    gaps: list[Gap] = field(default_factory=list)
    total_checks: int = len(GAP_CHECKS)

    @property
    def passed_checks(self) -> int:
        return self.total_checks - len(self.gaps)

    def to_dict(self) -> dict:
        return {
            "detected": self.state.to_dict(),
            "coverage": self.coverage.as_dict(),
            "gaps": [gap.to_dict() for gap in self.gaps],
            "checks": {"total": self.total_checks, "passed": self.passed_checks},
        }


def analyze_text(text: str, catalog: Catalog = DEFAULT_CATALOG) -> AnalysisReport:
    """Detect signals in ``text``, then score coverage and rank gaps.

    Never raises; empty input yields an all-absent state, zero scores and
    every check as a gap.
    """
    state = SignalDetector(catalog).detect(text)
    return AnalysisReport(
        state=state,
        coverage=score_coverage(state, catalog),
        gaps=rank_gaps(state, catalog),
        total_checks=len(GAP_CHECKS),
    )
