"""Coverage scorer: a pure, total function from DetectedState to scores.

Two formulas are non-uniform:

- **Permissions** award 33 points per list, so all three lists score 99,
  never 100.
- **Sandbox** scores a floor of 25 as soon as the word "sandbox" appears,
  even with no recognised sub-fields.
"""

from __future__ import annotations

from configforge.catalog import DEFAULT_CATALOG, Catalog
from configforge.core.coverage.models import CATEGORIES, CoverageScore
from configforge.discovery.models import DetectedState

# Points awarded per observed permission list (allow, ask, deny).
PERMISSION_POINTS = 33

# Floor applied to the sandbox score once sandboxing is mentioned at all.
SANDBOX_MENTION_FLOOR = 25

# Number of observed MCP servers at which the MCP score saturates.
MCP_SATURATION = 5


def _clamp(value: float) -> int:
    return int(max(0, min(100, round(value))))


def _ratio(observed: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return observed / total * 100


def score_coverage(state: DetectedState, catalog: Catalog = DEFAULT_CATALOG) -> CoverageScore:
    """Score the completeness of ``state`` per category.

    Args:
        state: Signals from the detector.
        catalog: Catalog the state was detected with; its sizes are the
            denominators.

    Returns:
        A ``CoverageScore`` with every field in [0, 100].
    """
    if state.sandbox_mentioned:
        sandbox = max(
            SANDBOX_MENTION_FLOOR,
            _ratio(len(state.sandbox_fields), len(catalog.sandbox_fields)),
        )
    else:
        sandbox = 0

    scores = {
        "files": _clamp(_ratio(len(state.files), len(catalog.file_locations))),
        "hooks": _clamp(_ratio(len(state.hook_events), len(catalog.hook_events))),
        "permissions": _clamp(state.permission_count * PERMISSION_POINTS),
        "sandbox": _clamp(sandbox),
        "mcp": _clamp(min(100.0, _ratio(len(state.mcp_servers), MCP_SATURATION))),
        "rules": _clamp(_ratio(len(state.rule_topics), len(catalog.rule_topics))),
    }
    overall = _clamp(sum(scores[name] for name in CATEGORIES) / len(CATEGORIES))
    return CoverageScore(**scores, overall=overall)
