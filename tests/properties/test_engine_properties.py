"""Property-based tests for the detection and scoring engine.

Properties:
    - Determinism: identical input gives identical state, scores and gaps.
    - Monotonicity: appending content never removes a detected signal.
    - Bounds: every coverage score lies in [0, 100].
    - Totality: gaps plus passing checks equal the number of checks.
    - The extractor never raises and always returns a list.
"""
from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from configforge.catalog import DEFAULT_CATALOG
from configforge.core.coverage import score_coverage
from configforge.core.gaps import GAP_CHECKS, evaluate_checks, rank_gaps
from configforge.discovery import DetectedState, detect
from configforge.extraction import extract_fragments


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

config_tokens = st.sampled_from([
    "CLAUDE.md",
    ".claude/settings.json",
    ".claude/settings.local.json",
    ".mcp.json",
    ".claude/rules/security.md",
    ".claude/rules/testing.md",
    ".claude/skills/lint-fix/SKILL.md",
    ".claude/agents/reviewer.md",
    ".claude/commands/release.md",
    '"PreToolUse": []',
    '"SessionStart": []',
    '"Stop": []',
    '"type": "command"',
    '"allow": []',
    '"deny": []',
    "ask:",
    "sandbox",
    '"enabled": true',
    '"network": {}',
    "server-github",
    "server-slack",
    "context7",
    "pyproject.toml",
    "django",
    "=" * 20,
    "---",
    "name: helper",
    "# Heading",
    '{"mcpServers": {"a": {"command": "x"}}}',
])

config_texts = st.lists(config_tokens, max_size=15).map("\n".join)
any_texts = st.one_of(st.text(max_size=300), config_texts)


def _signals(state: DetectedState) -> set[tuple[str, object]]:
    """Flatten a state into (field, value) pairs for subset comparison."""
    pairs: set[tuple[str, object]] = set()
    for key, value in state.to_dict().items():
        if isinstance(value, list):
            pairs.update((key, item) for item in value)
        elif value:
            pairs.add((key, value))
    return pairs


class TestDeterminism:
    """Identical input gives identical output."""

    @given(text=any_texts)
    def test_detect_is_deterministic(self, text: str) -> None:
        assert detect(text) == detect(text)

    @given(text=any_texts)
    def test_scores_and_gaps_are_deterministic(self, text: str) -> None:
        state = detect(text)
        assert score_coverage(state) == score_coverage(detect(text))
        assert rank_gaps(state) == rank_gaps(detect(text))


class TestMonotonicity:
    """Appending content never removes an observed signal."""

    @given(base=config_texts, extra=config_texts)
    @settings(max_examples=200)
    def test_appending_keeps_signals(self, base: str, extra: str) -> None:
        before = _signals(detect(base))
        after = _signals(detect(base + "\n" + extra))
        assert before <= after

    @given(base=config_texts, extra=config_texts)
    def test_appending_never_adds_gaps(self, base: str, extra: str) -> None:
        before = {gap.check_id for gap in rank_gaps(detect(base))}
        after = {gap.check_id for gap in rank_gaps(detect(base + "\n" + extra))}
        assert after <= before


class TestBounds:
    """Every coverage score is within [0, 100]."""

    @given(text=any_texts)
    def test_scores_in_range(self, text: str) -> None:
        score = score_coverage(detect(text))
        for value in score.as_dict().values():
            assert 0 <= value <= 100


def _maximal_text() -> str:
    """Every keyword of every catalog table, in a shape the detector accepts."""
    catalog = DEFAULT_CATALOG
    parts: list[str] = []
    parts.extend(catalog.hook_events)
    parts.extend(f'"type": "{kind}"' for kind in catalog.hook_mechanisms)
    parts.extend(f'"{name}": []' for name in catalog.permission_lists)
    parts.extend(catalog.permission_families)
    parts.extend(setting.key for setting in catalog.settings_fields)
    parts.append("sandbox")
    parts.extend(catalog.sandbox_fields)
    for location in catalog.file_locations:
        parts.extend(location.keywords)
    for server in catalog.mcp_servers:
        parts.extend(server.keywords)
    for table in (catalog.languages, catalog.frameworks, catalog.databases, catalog.infra):
        for entry in table:
            parts.extend(entry.keywords)
    for topic in catalog.rule_topics:
        parts.extend(f"rules/{keyword}.md" for keyword in topic.keywords)
    return "\n".join(parts)


class TestMaximalInput:
    """Input holding every catalog keyword stays within bounds."""

    def test_scores_in_range(self) -> None:
        score = score_coverage(detect(_maximal_text()))
        for value in score.as_dict().values():
            assert 0 <= value <= 100

    def test_saturated_categories(self) -> None:
        score = score_coverage(detect(_maximal_text()))
        assert score.files == 100
        assert score.hooks == 100
        assert score.sandbox == 100
        assert score.mcp == 100
        assert score.rules == 100
        assert score.permissions == 99
        assert score.overall == 100


class TestTotality:
    """Each check either passes or emits exactly one gap."""

    @given(text=any_texts)
    def test_gaps_plus_passes_equal_checks(self, text: str) -> None:
        state = detect(text)
        passed = sum(1 for _, gap in evaluate_checks(state) if gap is None)
        assert len(rank_gaps(state)) + passed == len(GAP_CHECKS)


class TestExtractorTotality:
    """The extractor accepts anything."""

    @given(text=any_texts)
    def test_never_raises(self, text: str) -> None:
        assert isinstance(extract_fragments(text), list)
