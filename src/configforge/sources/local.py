"""Assemble the engine's input text from local files.

The detection engine only ever sees one string. This module builds that
string from a local project directory: a file-tree dump followed by the
contents of the configuration-relevant files, each introduced by a banner
and its relative path::

    # File tree
    CLAUDE.md
    .claude/settings.json
    src/app.py

    ============================================================
    CLAUDE.md
    ============================================================
    # Project instructions
    ...

The banner layout is the one ``configforge.extraction`` segments on, so a
directory dump can be fed to both the detector and the extractor.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from configforge.exceptions import SourceError

logger = logging.getLogger(__name__)

BANNER = "=" * 60

# Directories never descended into.
_SKIP_DIRS = frozenset({
    ".git",
    ".hg",
    ".svn",
    "node_modules",
    "__pycache__",
    ".venv",
    "venv",
    ".tox",
    ".mypy_cache",
    ".pytest_cache",
    "dist",
    "build",
    "target",
    ".next",
})

# Files whose contents are always included, matched case-insensitively.
_KEY_FILENAMES = frozenset({
    "claude.md",
    "claude.local.md",
    "agents.md",
    "settings.json",
    "settings.local.json",
    ".mcp.json",
    "mcp.json",
    "plugin.json",
    "package.json",
    "pyproject.toml",
    "requirements.txt",
    "go.mod",
    "cargo.toml",
    "gemfile",
    "composer.json",
    "pom.xml",
    "dockerfile",
    "docker-compose.yml",
})

# Files under one of these directories are included when their suffix is in
# _CONFIG_SUFFIXES.
_CONFIG_DIRS = frozenset({"rules", "skills", "agents", "commands", "contexts", "hooks"})
_CONFIG_SUFFIXES = frozenset({".md", ".mdc", ".json", ".yaml", ".yml", ".sh", ".py"})

DEFAULT_MAX_FILES = 60
DEFAULT_MAX_FILE_BYTES = 64_000
DEFAULT_MAX_TREE_ENTRIES = 500


def _is_key_file(relative: Path) -> bool:
    if relative.name.casefold() in _KEY_FILENAMES:
        return True
    if relative.suffix.casefold() not in _CONFIG_SUFFIXES:
        return False
    return any(part.casefold() in _CONFIG_DIRS for part in relative.parts[:-1])


def _walk(root: Path) -> list[Path]:
    """All files under ``root`` as relative paths, sorted, skipping _SKIP_DIRS."""
    found: list[Path] = []

    def _on_error(exc: OSError) -> None:
        logger.warning("Cannot read directory: %s", exc.filename)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        dirnames[:] = sorted(d for d in dirnames if d not in _SKIP_DIRS)
        base = Path(dirpath)
        for filename in sorted(filenames):
            found.append((base / filename).relative_to(root))
    return found


def _read_file(path: Path, max_bytes: int) -> str | None:
    """Read a text file, or None when it is too large or unreadable."""
    try:
        size = path.stat().st_size
        if size > max_bytes:
            logger.warning("Skipping %s: %d bytes exceeds limit of %d", path, size, max_bytes)
            return None
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        logger.warning("Cannot read file: %s", path)
        return None


def read_directory(
    root: Path | str,
    max_files: int = DEFAULT_MAX_FILES,
    max_file_bytes: int = DEFAULT_MAX_FILE_BYTES,
    max_tree_entries: int = DEFAULT_MAX_TREE_ENTRIES,
) -> str:
    """Build the tree-plus-contents text blob for a project directory.

    Args:
        root: Project directory.
        max_files: Maximum number of key files whose contents are included.
        max_file_bytes: Files larger than this are listed but not included.
        max_tree_entries: Maximum number of paths in the tree section.

    Returns:
        The assembled text. An empty directory gives just the tree heading.

    Raises:
        SourceError: If ``root`` is not a directory.
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise SourceError(f"Not a directory: {root_path}")

    files = _walk(root_path)
    tree = [path.as_posix() for path in files[:max_tree_entries]]
    if len(files) > max_tree_entries:
        tree.append(f"... ({len(files) - max_tree_entries} more)")

    sections = ["# File tree\n" + "\n".join(tree)]
    included = 0
    for relative in files:
        if included >= max_files:
            logger.warning("File limit of %d reached; remaining files omitted", max_files)
            break
        if not _is_key_file(relative):
            continue
        content = _read_file(root_path / relative, max_file_bytes)
        if content is None:
            continue
        sections.append(f"{BANNER}\n{relative.as_posix()}\n{BANNER}\n{content.rstrip()}")
        included += 1
    return "\n\n".join(sections) + "\n"


def read_source(target: Path | str) -> str:
    """Read the engine input from stdin (``"-"``), a file, or a directory.

    Raises:
        SourceError: If the target does not exist or cannot be read.
    """
    if str(target) == "-":
        return sys.stdin.buffer.read().decode("utf-8", errors="replace")

    path = Path(target)
    if path.is_dir():
        return read_directory(path)
    if not path.is_file():
        raise SourceError(f"No such file or directory: {path}")
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise SourceError(f"Cannot read {path}: {exc}") from exc
