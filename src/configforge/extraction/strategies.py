"""Segmentation strategies for pasted text.

Each strategy takes the raw text and returns a list of fragments; an empty
list means "this strategy does not apply". The extractor tries the
segmentation strategies in order and keeps the first non-empty result:

1. ``segment_by_banners`` -- repeated banner lines, each followed by a
   path line, as produced by concatenating files::

       ============================================================
       .claude/rules/security.md
       ============================================================
       # Security
       ...

2. ``segment_by_frontmatter`` -- two or more ``---`` headers carrying a
   ``name`` key, as produced by pasting several agent or skill files.

``single_block_fallback`` is the last resort when no strategy (including
embedded-object detection) produced anything.
"""

from __future__ import annotations

import re
from pathlib import PurePosixPath
from typing import Any, Callable

from configforge.discovery.normalizer import normalize
from configforge.extraction.frontmatter import (
    FrontmatterHeader,
    find_headers,
    leading_header,
)
from configforge.extraction.models import CandidateFragment, FragmentCategory

Strategy = Callable[[str], "list[CandidateFragment]"]

# A banner is five or more repetitions of one marker character.
_BANNER_LINE = re.compile(r"^\s*([=\-#*~])\1{4,}\s*$")

KNOWN_EXTENSIONS: tuple[str, ...] = (
    "md", "mdc", "json", "yaml", "yml", "toml", "txt", "sh", "py", "js", "ts",
)

_PATH_LINE = re.compile(
    r"^\s*(?:file:\s*)?[`'\"]?"
    r"((?:[\w.~@-]+/)*[\w.@-]+\.(?:" + "|".join(KNOWN_EXTENSIONS) + r"))"
    r"[`'\"]?\s*$",
    re.IGNORECASE,
)

# Directory tokens that decide the category of a banner-delimited file.
_DIRECTORY_CATEGORIES: dict[str, FragmentCategory] = {
    "skills": FragmentCategory.SKILL,
    "rules": FragmentCategory.RULE,
    "agents": FragmentCategory.AGENT,
    "contexts": FragmentCategory.CONTEXT,
}

# Header keys copied into fragment metadata when present.
_COMPANION_KEYS: dict[str, str] = {
    "description": "description",
    "tools": "tools",
    "allowed-tools": "tools",
    "model": "model",
    "context": "context",
}

# Inputs at or below this length (after stripping) are never a fragment.
MIN_FALLBACK_LENGTH = 20

_HEADING_LINE = re.compile(r"^#{1,6}\s+(.+)$")
_SLUG_INVALID = re.compile(r"[^a-z0-9]+")


def _companions(fields: dict[str, Any]) -> dict[str, Any]:
    metadata: dict[str, Any] = {}
    for key, target in _COMPANION_KEYS.items():
        if key in fields and target not in metadata:
            metadata[target] = fields[key]
    return metadata


def _header_metadata(header: FrontmatterHeader) -> dict[str, Any]:
    metadata: dict[str, Any] = {}
    if header.name:
        metadata["name"] = header.name
    metadata.update(_companions(header.fields))
    return metadata


def _slugify(text: str) -> str:
    return _SLUG_INVALID.sub("-", text.casefold()).strip("-")


def skill_path(name: str) -> str:
    return f".claude/skills/{name}/SKILL.md"


def agent_path(name: str) -> str:
    return f".claude/agents/{name}.md"


# ---------------------------------------------------------------------------
# Strategy 1: explicit banner markers
# ---------------------------------------------------------------------------


def category_for_path(path: str) -> FragmentCategory:
    """Classify a file by the first category directory in its path."""
    for part in PurePosixPath(path).parts[:-1]:
        category = _DIRECTORY_CATEGORIES.get(part.casefold())
        if category is not None:
            return category
    return FragmentCategory.FILE


def _default_name(path: str) -> str:
    pure = PurePosixPath(path)
    if pure.name.casefold() == "skill.md" and len(pure.parts) > 1:
        return pure.parent.name
    return pure.stem


def _banner_markers(lines: list[str]) -> list[tuple[int, str]]:
    """Return ``(banner_index, path)`` for each banner followed by a path line."""
    markers: list[tuple[int, str]] = []
    for index in range(len(lines) - 1):
        if _BANNER_LINE.match(lines[index]):
            path_match = _PATH_LINE.match(lines[index + 1])
            if path_match:
                markers.append((index, path_match.group(1)))
    return markers


def _block_lines(lines: list[str], start: int, end: int) -> list[str]:
    """Trim banner lines directly after the path line and at the block end."""
    while start < end and _BANNER_LINE.match(lines[start]):
        start += 1
    while end > start and (not lines[end - 1].strip() or _BANNER_LINE.match(lines[end - 1])):
        end -= 1
    return lines[start:end]


def segment_by_banners(text: str) -> list[CandidateFragment]:
    """Split ``text`` at banner + path-line pairs.

    A block spans from after one pair to before the next (or the end of
    input). The category comes from directory tokens in the path; the name
    from frontmatter ``name``, else the skill directory, else the stem.
    """
    lines = text.splitlines()
    markers = _banner_markers(lines)
    fragments: list[CandidateFragment] = []
    for position, (index, path) in enumerate(markers):
        end = markers[position + 1][0] if position + 1 < len(markers) else len(lines)
        block = _block_lines(lines, index + 2, end)
        metadata: dict[str, Any] = {"name": _default_name(path)}
        header = leading_header(block)
        if header is not None:
            metadata.update(_header_metadata(header))
        fragments.append(CandidateFragment(
            inferred_path=path,
            raw_content="\n".join(block).strip(),
            category=category_for_path(path),
            metadata=metadata,
        ))
    return fragments


# ---------------------------------------------------------------------------
# Strategy 2: repeated frontmatter headers
# ---------------------------------------------------------------------------


def _is_invocable(header: FrontmatterHeader) -> bool:
    return any("invocable" in key.casefold() for key in header.fields)


def segment_by_frontmatter(text: str) -> list[CandidateFragment]:
    """Split ``text`` at named frontmatter headers.

    Applies only when at least two headers carry a ``name`` key. Each
    fragment runs from its header to the next named header (or end of
    input). Headers with an ``*invocable*`` key are skills, others agents.
    """
    lines = text.splitlines()
    headers = [header for header in find_headers(lines) if header.name]
    if len(headers) < 2:
        return []

    fragments: list[CandidateFragment] = []
    for position, header in enumerate(headers):
        end = headers[position + 1].start if position + 1 < len(headers) else len(lines)
        name = header.name or ""
        if _is_invocable(header):
            category, path = FragmentCategory.SKILL, skill_path(name)
        else:
            category, path = FragmentCategory.AGENT, agent_path(name)
        fragments.append(CandidateFragment(
            inferred_path=path,
            raw_content="\n".join(lines[header.start:end]).strip(),
            category=category,
            metadata=_header_metadata(header),
        ))
    return fragments


SEGMENTATION_STRATEGIES: tuple[Strategy, ...] = (
    segment_by_banners,
    segment_by_frontmatter,
)


# ---------------------------------------------------------------------------
# Last resort: the whole input as one block
# ---------------------------------------------------------------------------


def single_block_fallback(text: str) -> list[CandidateFragment]:
    """Treat the whole input as one fragment, classified by shape.

    Frontmatter with a ``name`` makes a skill; a Markdown heading or quote
    line makes a generic file named after the first heading. Anything else,
    or input of ``MIN_FALLBACK_LENGTH`` characters or fewer, is discarded.
    """
    stripped = text.strip()
    if len(stripped) <= MIN_FALLBACK_LENGTH:
        return []

    named = [header for header in find_headers(text.splitlines()) if header.name]
    if named:
        header = named[0]
        name = header.name or ""
        return [CandidateFragment(
            inferred_path=skill_path(name),
            raw_content=stripped,
            category=FragmentCategory.SKILL,
            metadata=_header_metadata(header),
        )]

    lines = normalize(text).lines
    if not any(line.startswith(("#", ">")) for line in lines):
        return []

    title = next(
        (m.group(1).strip() for m in map(_HEADING_LINE.match, lines) if m),
        "",
    )
    slug = _slugify(title) or "pasted-content"
    metadata: dict[str, Any] = {"name": slug}
    if title:
        metadata["title"] = title
    return [CandidateFragment(
        inferred_path=f"{slug}.md",
        raw_content=stripped,
        category=FragmentCategory.FILE,
        metadata=metadata,
    )]
