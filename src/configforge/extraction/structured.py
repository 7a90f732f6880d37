"""Embedded structured-object detection.

Pasted text often contains JSON configuration inline: a whole ``.mcp.json``
or the ``hooks`` block of a settings file, sometimes inside Markdown or
next to other files. This pass finds every ``"mcpServers"``/``"servers"``
key and every ``"hooks"`` key whose value is a JSON object, decodes that
object in place with ``json.JSONDecoder.raw_decode``, and emits one
fragment per entry:

.. code-block:: json

    {
      "mcpServers": {
        "github": {"command": "npx", "args": ["-y", "@modelcontextprotocol/server-github"]}
      },
      "hooks": {
        "PostToolUse": [{"matcher": "Edit", "hooks": [{"type": "command", "command": "ruff format"}]}]
      }
    }

Objects that fail to decode (trailing commas, comments, truncation, or
nesting too deep to decode) are skipped. The pass runs regardless of
how the rest of the text was segmented.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from configforge.extraction.models import CandidateFragment, FragmentCategory

logger = logging.getLogger(__name__)

# The lookahead pins the match end on the opening brace of the value object,
# which is where raw_decode starts. Hook handler lists ("hooks": [...]) never
# match.
_SERVERS_KEY = re.compile(r'"(?:mcpServers|servers)"\s*:\s*(?=\{)')
_HOOKS_KEY = re.compile(r'"hooks"\s*:\s*(?=\{)')

MCP_CONFIG_PATH = ".mcp.json"
HOOKS_CONFIG_PATH = ".claude/settings.json"

_DECODER = json.JSONDecoder()


def _decoded_objects(pattern: re.Pattern[str], text: str) -> list[dict]:
    """Decode the object value following each match of ``pattern``."""
    objects: list[dict] = []
    for match in pattern.finditer(text):
        try:
            value, _ = _DECODER.raw_decode(text, match.end())
        except (json.JSONDecodeError, RecursionError) as exc:
            logger.debug("Skipping malformed embedded object at offset %d: %s", match.end(), exc)
            continue
        if isinstance(value, dict):
            objects.append(value)
    return objects


def _server_transport(config: dict) -> str:
    declared = config.get("type")
    if isinstance(declared, str) and declared:
        return declared
    if "command" in config:
        return "stdio"
    if "url" in config:
        return "http"
    return "unknown"


def _server_fragment(name: str, config: dict) -> CandidateFragment:
    metadata: dict[str, Any] = {"name": name, "transport": _server_transport(config)}
    if isinstance(config.get("command"), str):
        args = config.get("args", [])
        if not isinstance(args, list):
            args = []
        metadata["command"] = " ".join([config["command"]] + [str(a) for a in args])
    if isinstance(config.get("url"), str):
        metadata["url"] = config["url"]
    if isinstance(config.get("env"), dict):
        metadata["env"] = sorted(str(k) for k in config["env"])
    return CandidateFragment(
        inferred_path=MCP_CONFIG_PATH,
        raw_content=json.dumps({"mcpServers": {name: config}}, indent=2),
        category=FragmentCategory.MCP_SERVER,
        metadata=metadata,
    )


def _hook_commands(matchers: list) -> tuple[list[str], list[str]]:
    """Collect matcher patterns and command strings from one event's entries."""
    patterns: list[str] = []
    commands: list[str] = []
    for entry in matchers:
        if not isinstance(entry, dict):
            continue
        if isinstance(entry.get("matcher"), str):
            patterns.append(entry["matcher"])
        handlers = entry.get("hooks", [])
        if not isinstance(handlers, list):
            continue
        for handler in handlers:
            if isinstance(handler, dict) and isinstance(handler.get("command"), str):
                commands.append(handler["command"])
    return patterns, commands


def _hook_fragment(event: str, config: Any) -> CandidateFragment:
    metadata: dict[str, Any] = {"name": event, "event": event}
    if isinstance(config, list):
        patterns, commands = _hook_commands(config)
        metadata["handlers"] = len(config)
        if patterns:
            metadata["matchers"] = patterns
        if commands:
            metadata["commands"] = commands
    return CandidateFragment(
        inferred_path=HOOKS_CONFIG_PATH,
        raw_content=json.dumps({"hooks": {event: config}}, indent=2),
        category=FragmentCategory.HOOK,
        metadata=metadata,
    )


def extract_structured_objects(text: str) -> list[CandidateFragment]:
    """Find embedded MCP server maps and hook maps in ``text``.

    Returns:
        MCP server fragments (one per server entry) followed by hook
        fragments (one per event entry). Empty when nothing decodes.
    """
    fragments: list[CandidateFragment] = []
    for servers in _decoded_objects(_SERVERS_KEY, text):
        for name, config in servers.items():
            if isinstance(config, dict):
                fragments.append(_server_fragment(str(name), config))
    for hooks in _decoded_objects(_HOOKS_KEY, text):
        for event, config in hooks.items():
            fragments.append(_hook_fragment(str(event), config))
    return fragments
