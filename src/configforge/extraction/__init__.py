"""Fragment extraction: turn pasted text into importable configuration pieces.

Submodules:
    models       -- CandidateFragment, FragmentCategory
    frontmatter  -- ``---`` header location and parsing
    strategies   -- banner and frontmatter segmentation, single-block fallback
    structured   -- embedded MCP server and hook objects
    extractor    -- FragmentExtractor driver, group_by_category()

Usage::

    from configforge.extraction import extract_fragments, group_by_category

    grouped = group_by_category(extract_fragments(pasted))
"""

from configforge.extraction.models import CandidateFragment, FragmentCategory
from configforge.extraction.extractor import (
    FragmentExtractor,
    extract_fragments,
    group_by_category,
)

__all__ = [
    "CandidateFragment",
    "FragmentCategory",
    "FragmentExtractor",
    "extract_fragments",
    "group_by_category",
]
