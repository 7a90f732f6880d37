"""Data models for the gap ranker: Severity and Gap."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Severity(IntEnum):
    """Four-level severity scale for configuration gaps.

    The integer encoding enables direct comparison: LOW < MEDIUM < HIGH < CRITICAL.
    """

    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4

    @property
    def label(self) -> str:
        """Lower-case name used in JSON output and CLI options."""
        return self.name.lower()

    @classmethod
    def from_label(cls, label: str) -> Severity:
        """Parse a lower- or upper-case severity name."""
        return cls[label.upper()]


@dataclass(frozen=True)
class Gap:
    """One missing or incomplete configuration element.

    Gaps are derived from a ``DetectedState`` on every call and never
    stored. Each failing check produces exactly one Gap.

    Attributes:
        check_id: Identifier of the check that produced the gap
            (e.g., "lifecycle.pre-compact").
        category: Check group: files, hooks, lifecycle, permissions,
            sandbox or rules.
        severity: How much the gap matters.
        item: Short name of the missing element.
        description: Remediation text.
    """

    check_id: str
    category: str
    severity: Severity
    item: str
    description: str

    def to_dict(self) -> dict[str, str]:
        return {
            "check_id": self.check_id,
            "category": self.category,
            "severity": self.severity.label,
            "item": self.item,
            "description": self.description,
        }
