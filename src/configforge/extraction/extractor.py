"""Fragment extractor: segment pasted text into typed configuration fragments.

Pipeline for one input:

1. Try each segmentation strategy in order (banners, then repeated
   frontmatter); keep the first non-empty result.
2. Always add fragments for embedded JSON objects (MCP server maps, hook
   maps).
3. If steps 1-2 found nothing, fall back to classifying the whole input as
   a single block.

Adding a heuristic means adding a function to the strategy tuple; the
driver does not change. The extractor never raises and always returns a
(possibly empty) list.
"""

from __future__ import annotations

import logging

from configforge.extraction.models import CandidateFragment, FragmentCategory
from configforge.extraction.strategies import (
    SEGMENTATION_STRATEGIES,
    Strategy,
    single_block_fallback,
)
from configforge.extraction.structured import extract_structured_objects

logger = logging.getLogger(__name__)


class FragmentExtractor:
    """Runs the ordered segmentation strategies over pasted text.

    Usage::

        extractor = FragmentExtractor()
        for fragment in extractor.extract(pasted):
            print(fragment.category.value, fragment.inferred_path)
    """

    def __init__(self, strategies: tuple[Strategy, ...] = SEGMENTATION_STRATEGIES) -> None:
        self.strategies = strategies

    def extract(self, text: str) -> list[CandidateFragment]:
        """Extract candidate fragments from ``text``.

        Args:
            text: Arbitrary pasted text, possibly several concatenated files.

        Returns:
            Fragments in discovery order: segmented fragments first, then
            embedded-object fragments, or a single fallback fragment.
        """
        fragments: list[CandidateFragment] = []
        for strategy in self.strategies:
            found = strategy(text)
            if found:
                logger.debug(
                    "%s produced %d fragment(s)",
                    getattr(strategy, "__name__", repr(strategy)), len(found),
                )
                fragments.extend(found)
                break

        fragments.extend(extract_structured_objects(text))

        if not fragments:
            fragments.extend(single_block_fallback(text))
        return fragments


def extract_fragments(text: str) -> list[CandidateFragment]:
    """Extract candidate fragments with the default strategies."""
    return FragmentExtractor().extract(text)


def group_by_category(
    fragments: list[CandidateFragment],
) -> dict[FragmentCategory, list[CandidateFragment]]:
    """Group fragments by category, in ``FragmentCategory`` order.

    Categories without fragments are omitted. Order within a group is
    extraction order.
    """
    grouped: dict[FragmentCategory, list[CandidateFragment]] = {}
    for category in FragmentCategory:
        members = [f for f in fragments if f.category is category]
        if members:
            grouped[category] = members
    return grouped
