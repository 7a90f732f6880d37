"""Gap ranking: which configuration elements are missing, and how badly?

Submodules:
    models  -- Severity, Gap
    checks  -- GapCheck and the ordered GAP_CHECKS catalog
    ranker  -- rank_gaps(), evaluate_checks(), sort_by_severity()
"""

from configforge.core.gaps.models import Gap, Severity
from configforge.core.gaps.checks import GAP_CHECKS, GapCheck
from configforge.core.gaps.ranker import (
    evaluate_checks,
    filter_by_severity,
    rank_gaps,
    sort_by_severity,
)

__all__ = [
    "GAP_CHECKS",
    "Gap",
    "GapCheck",
    "Severity",
    "evaluate_checks",
    "filter_by_severity",
    "rank_gaps",
    "sort_by_severity",
]
