"""Text normalisation shared by the detector and the fragment extractor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NormalizedText:
    """Scan-ready views of one raw input.

    Attributes:
        raw: The input exactly as received.
        folded: Case-folded copy used for substring search.
        lines: Stripped, non-blank lines in input order, used for
            structural scans.
    """

    raw: str
    folded: str
    lines: tuple[str, ...]


def normalize(text: str) -> NormalizedText:
    """Produce the case-folded and line views of ``text``.

    Always succeeds; empty input yields empty views.
    """
    stripped = (line.strip() for line in text.splitlines())
    lines = tuple(line for line in stripped if line)
    return NormalizedText(raw=text, folded=text.casefold(), lines=lines)
