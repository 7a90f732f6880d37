"""Locate and parse ``---``-fenced key:value headers in arbitrary text.

Headers are found line by line rather than with one regex so that a
Markdown horizontal rule (``---``) in a body is not mistaken for a header:
every line between the two delimiters must look like YAML mapping content
(``key: value``, an indented continuation, or a list item).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

import yaml

_DELIMITER = "---"

# Lines allowed between delimiters.
_KEY_LINE = re.compile(r"^[A-Za-z_][\w-]*\s*:")
_CONTINUATION_LINE = re.compile(r"^(?:\s+\S|-\s)")

# Loose ``key: value`` split used when YAML parsing fails.
_LOOSE_PAIR = re.compile(r"^([A-Za-z_][\w-]*)\s*:\s*(.*)$")

# Headers longer than this are treated as ordinary text.
_MAX_HEADER_LINES = 40


@dataclass(frozen=True)
class FrontmatterHeader:
    """A header found in a list of lines.

    Attributes:
        start: Index of the opening delimiter line.
        end: Index of the closing delimiter line.
        fields: Parsed key/value pairs.
    """

    start: int
    end: int
    fields: dict[str, Any]

    @property
    def name(self) -> str | None:
        value = self.fields.get("name")
        if value is None or value == "":
            return None
        return str(value)


def _plain(value: Any) -> Any:
    """Reduce a YAML value to str, bool, int, float or a list of str."""
    if isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, list):
        return [str(v) for v in value]
    if value is None:
        return ""
    return str(value)


def _loose_fields(lines: list[str]) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for line in lines:
        match = _LOOSE_PAIR.match(line.strip())
        if match:
            fields[match.group(1)] = match.group(2).strip().strip("\"'")
    return fields


def parse_fields(lines: list[str]) -> dict[str, Any]:
    """Parse header lines as YAML, falling back to loose ``key: value`` pairs.

    Descriptions such as ``description: Use when: tests fail`` are invalid
    YAML but common in hand-written headers; the loose fallback keeps them.
    """
    try:
        data = yaml.safe_load("\n".join(lines))
    except (yaml.YAMLError, ValueError, RecursionError):
        # ValueError: PyYAML raises it for out-of-range timestamps.
        # RecursionError: deeply nested flow collections.
        return _loose_fields(lines)
    if not isinstance(data, dict):
        return _loose_fields(lines)
    return {str(key): _plain(value) for key, value in data.items()}


def _closing_delimiter(lines: list[str], start: int) -> int | None:
    limit = min(len(lines), start + 1 + _MAX_HEADER_LINES)
    for index in range(start + 1, limit):
        line = lines[index]
        if line.strip() == _DELIMITER:
            return index if index > start + 1 else None
        if not line.strip() or _KEY_LINE.match(line) or _CONTINUATION_LINE.match(line):
            continue
        return None
    return None


def find_headers(lines: list[str]) -> list[FrontmatterHeader]:
    """Return every well-formed header in ``lines``, in order.

    Args:
        lines: Raw lines (not stripped) of the text to scan.
    """
    headers: list[FrontmatterHeader] = []
    index = 0
    while index < len(lines):
        if lines[index].strip() == _DELIMITER:
            close = _closing_delimiter(lines, index)
            if close is not None:
                fields = parse_fields(lines[index + 1:close])
                if fields:
                    headers.append(FrontmatterHeader(start=index, end=close, fields=fields))
                    index = close + 1
                    continue
        index += 1
    return headers


def leading_header(lines: list[str]) -> FrontmatterHeader | None:
    """Return the header that opens ``lines`` (after blank lines), if any."""
    for index, line in enumerate(lines):
        if line.strip():
            if line.strip() != _DELIMITER:
                return None
            headers = find_headers(lines[index:])
            if headers and headers[0].start == 0:
                header = headers[0]
                return FrontmatterHeader(
                    start=header.start + index,
                    end=header.end + index,
                    fields=header.fields,
                )
            return None
    return None
