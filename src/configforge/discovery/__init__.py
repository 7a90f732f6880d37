"""Configuration discovery: normalise input text and detect existing config.

Public API::

    from configforge.discovery import detect

    state = detect(text)
    print(state.hook_events, state.mcp_servers)
"""

from __future__ import annotations

from configforge.discovery.detector import SignalDetector, detect
from configforge.discovery.models import DetectedState
from configforge.discovery.normalizer import NormalizedText, normalize

__all__ = [
    "DetectedState",
    "NormalizedText",
    "SignalDetector",
    "detect",
    "normalize",
]
