"""Signal detector: scan normalized text against the catalogs.

The detector answers "what configuration already exists?" for a text blob
that has no guaranteed schema: a file-tree dump, concatenated file
contents, or anything a user pastes. Every check is a keyword or shape
heuristic:

- **Files** -- substring test of each location's keywords.
- **Identifier lists** -- path-shaped patterns (``rules/<name>.md``,
  ``skills/<name>/SKILL.md``, ...) over the raw text, deduplicated in
  first-seen order.
- **Hooks** -- each event name as a whole token; each mechanism kind under
  JSON (``"type": "command"``) and colon (``type: command``) styles.
- **Permissions** -- each list name as ``"allow"`` or ``allow:``. A bare
  ``allow:`` in prose also counts; that false positive is accepted.
- **Sandbox** -- the token ``sandbox`` plus known sub-field names.
- **MCP servers and stack** -- registry/synonym keyword presence.

Detection may over- or under-report, but never raises.
"""

from __future__ import annotations

import re

from configforge.catalog import DEFAULT_CATALOG, Catalog, KeywordEntry
from configforge.discovery.models import DetectedState
from configforge.discovery.normalizer import NormalizedText, normalize

# Path-shaped identifier patterns, matched case-insensitively on the raw text
# so identifiers keep their original spelling.
_RULE_PATTERN = re.compile(r"rules/((?:[\w-]+/)*[\w-]+)\.md", re.IGNORECASE)
_SKILL_PATTERN = re.compile(r"skills/([\w-]+)/skill\.md", re.IGNORECASE)
_AGENT_PATTERN = re.compile(r"agents/([\w-]+)\.md", re.IGNORECASE)
_COMMAND_PATTERN = re.compile(r"commands/((?:[\w-]+/)*[\w-]+)\.md", re.IGNORECASE)
_CONTEXT_PATTERN = re.compile(r"contexts/([\w-]+)\.md", re.IGNORECASE)


def _distinct_matches(pattern: re.Pattern[str], text: str) -> tuple[str, ...]:
    """All distinct first-group matches of ``pattern``, in first-seen order."""
    return tuple(dict.fromkeys(m.group(1) for m in pattern.finditer(text)))


def _matching_tags(table: tuple[KeywordEntry, ...], folded: str) -> tuple[str, ...]:
    """Tags of every synonym-table entry with a keyword present in ``folded``."""
    return tuple(
        entry.tag for entry in table
        if any(keyword in folded for keyword in entry.keywords)
    )


class SignalDetector:
    """Detects configuration signals in text using one catalog.

    The detector compiles the catalog-dependent patterns once at
    construction and is otherwise stateless, so one instance can serve any
    number of ``detect()`` calls.

    Usage::

        detector = SignalDetector(catalog)
        state = detector.detect(repository_dump)
        if not state.has_project_instructions:
            ...
    """

    def __init__(self, catalog: Catalog = DEFAULT_CATALOG) -> None:
        self.catalog = catalog
        self._event_patterns = [
            (event, re.compile(rf"\b{re.escape(event)}\b", re.IGNORECASE))
            for event in catalog.hook_events
        ]
        self._mechanism_patterns = [
            (kind, self._discriminator_pattern("type", kind))
            for kind in catalog.hook_mechanisms
        ]
        self._permission_patterns = [
            (name, re.compile(rf'"{re.escape(name.casefold())}"|\b{re.escape(name.casefold())}\s*:'))
            for name in catalog.permission_lists
        ]

    @staticmethod
    def _discriminator_pattern(key: str, value: str) -> re.Pattern[str]:
        """Match ``"key": "value"`` (JSON) or ``key: value`` (colon style)."""
        k = re.escape(key.casefold())
        v = re.escape(value.casefold())
        return re.compile(rf'"{k}"\s*:\s*"{v}"|\b{k}\s*:\s*["\']?{v}\b')

    def detect(self, text: str) -> DetectedState:
        """Scan ``text`` and return every signal observed.

        Args:
            text: Arbitrary input; may be empty.

        Returns:
            A ``DetectedState``. Empty or irrelevant input gives an
            all-absent state.
        """
        normalized = normalize(text)
        folded = normalized.folded
        rules = _distinct_matches(_RULE_PATTERN, normalized.raw)
        sandbox_mentioned = "sandbox" in folded

        return DetectedState(
            files=self._detect_files(folded),
            rules=rules,
            skills=_distinct_matches(_SKILL_PATTERN, normalized.raw),
            agents=_distinct_matches(_AGENT_PATTERN, normalized.raw),
            commands=_distinct_matches(_COMMAND_PATTERN, normalized.raw),
            contexts=_distinct_matches(_CONTEXT_PATTERN, normalized.raw),
            rule_topics=self._detect_rule_topics(rules),
            hook_events=tuple(
                event for event, pattern in self._event_patterns
                if pattern.search(normalized.raw)
            ),
            hook_mechanisms=tuple(
                kind for kind, pattern in self._mechanism_patterns
                if pattern.search(folded)
            ),
            **self._detect_permissions(folded),
            sandbox_mentioned=sandbox_mentioned,
            sandbox_fields=self._detect_sandbox_fields(normalized) if sandbox_mentioned else (),
            mcp_servers=tuple(
                server.id for server in self.catalog.mcp_servers
                if any(keyword in folded for keyword in server.keywords)
            ),
            languages=_matching_tags(self.catalog.languages, folded),
            frameworks=_matching_tags(self.catalog.frameworks, folded),
            databases=_matching_tags(self.catalog.databases, folded),
            infra=_matching_tags(self.catalog.infra, folded),
        )

    def _detect_files(self, folded: str) -> tuple[str, ...]:
        return tuple(
            location.key for location in self.catalog.file_locations
            if any(keyword in folded for keyword in location.keywords)
        )

    def _detect_rule_topics(self, rules: tuple[str, ...]) -> tuple[str, ...]:
        names = [rule.casefold() for rule in rules]
        return tuple(
            topic.tag for topic in self.catalog.rule_topics
            if any(keyword in name for name in names for keyword in topic.keywords)
        )

    def _detect_permissions(self, folded: str) -> dict[str, bool]:
        found = {
            name.casefold() for name, pattern in self._permission_patterns
            if pattern.search(folded)
        }
        return {
            "permissions_allow": "allow" in found,
            "permissions_ask": "ask" in found,
            "permissions_deny": "deny" in found,
        }

    def _detect_sandbox_fields(self, normalized: NormalizedText) -> tuple[str, ...]:
        return tuple(
            name for name in self.catalog.sandbox_fields
            if name.casefold() in normalized.folded
        )


def detect(text: str, catalog: Catalog = DEFAULT_CATALOG) -> DetectedState:
    """Detect configuration signals in ``text`` with ``catalog``.

    Convenience wrapper around ``SignalDetector(catalog).detect(text)``.
    """
    return SignalDetector(catalog).detect(text)
