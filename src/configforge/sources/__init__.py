"""Input sources: build the engine's text blob from local files or stdin."""

from __future__ import annotations

from configforge.sources.local import BANNER, read_directory, read_source

__all__ = [
    "BANNER",
    "read_directory",
    "read_source",
]
