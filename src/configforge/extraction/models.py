"""Data models for the fragment extractor."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FragmentCategory(Enum):
    """What a fragment of pasted text is inferred to define."""

    SKILL = "skill"
    RULE = "rule"
    AGENT = "agent"
    HOOK = "hook"
    CONTEXT = "context"
    MCP_SERVER = "mcp-server"
    FILE = "file"


@dataclass(frozen=True)
class CandidateFragment:
    """A tentatively classified chunk of pasted text.

    Fragments are proposals: a caller shows them for selection and moves
    the chosen ones into its own working configuration. Nothing here
    deduplicates fragments against each other or against prior selections.

    Attributes:
        inferred_path: Where the fragment would live in a project
            (e.g., ".claude/skills/lint-fix/SKILL.md").
        raw_content: The fragment text as found (or re-serialized JSON for
            embedded objects).
        category: Inferred category.
        metadata: Extracted fields such as ``name``, ``description``,
            ``tools``, ``model``, ``context``, ``command`` or ``event``.
    """

    inferred_path: str
    raw_content: str
    category: FragmentCategory
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str:
        """The fragment's name metadata, or its path when unnamed."""
        return str(self.metadata.get("name", self.inferred_path))

    def to_dict(self) -> dict[str, Any]:
        return {
            "inferred_path": self.inferred_path,
            "category": self.category.value,
            "metadata": dict(self.metadata),
            "raw_content": self.raw_content,
        }
