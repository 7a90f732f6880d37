"""ConfigForge: configuration discovery and gap scoring for AI coding assistants."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
