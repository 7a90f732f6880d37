"""CoverageScore: per-category completeness of a detected configuration."""

from __future__ import annotations

from dataclasses import dataclass

CATEGORIES: tuple[str, ...] = ("files", "hooks", "permissions", "sandbox", "mcp", "rules")


@dataclass(frozen=True)
class CoverageScore:
    """Completeness scores, each an integer in [0, 100].

    Attributes:
        files: Share of canonical file locations observed.
        hooks: Share of canonical hook events observed.
        permissions: 33 points per permission list observed.
        sandbox: 0 when sandboxing is never mentioned, at least 25 otherwise.
        mcp: Saturates at 100 once five registry servers are observed.
        rules: Share of rule topics covered.
        overall: Rounded mean of the six category scores.
    """

    files: int = 0
    hooks: int = 0
    permissions: int = 0
    sandbox: int = 0
    mcp: int = 0
    rules: int = 0
    overall: int = 0

    def categories(self) -> dict[str, int]:
        """Return the six category scores keyed by category name."""
        return {name: getattr(self, name) for name in CATEGORIES}

    def as_dict(self) -> dict[str, int]:
        """Return all scores including ``overall``."""
        return {**self.categories(), "overall": self.overall}
