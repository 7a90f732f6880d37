"""Coverage scoring: how complete is a detected configuration?

Submodules:
    models  -- CoverageScore
    scorer  -- score_coverage()
"""

from configforge.core.coverage.models import CATEGORIES, CoverageScore
from configforge.core.coverage.scorer import score_coverage

__all__ = [
    "CATEGORIES",
    "CoverageScore",
    "score_coverage",
]
