"""Parser for `---` delimited key/value headers at the top of MD and MDX files."""

from __future__ import annotations

import re
from typing import List, Tuple

from ..models import Metadata, MetadataValue

_BLOCK_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?:(?P<block>.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL,
)
_LINE_PATTERN = re.compile(r"^(\w+):\s*(.+)$")
_EDGE_QUOTES = re.compile(r"^['\"]|['\"]$")
_ANY_QUOTE = re.compile(r"['\"]")


def has_front_matter(text: str) -> bool:
    return _BLOCK_PATTERN.match(text) is not None


def parse_front_matter(text: str) -> Tuple[Metadata, str]:
    """Split a leading front-matter block from ``text``.

    Returns ``({}, text)`` untouched when the file does not open with a
    ``---`` line followed by a closing ``---`` line. Lines that are not
    ``key: value`` pairs are skipped; bracketed values become lists.
    """
    match = _BLOCK_PATTERN.match(text)
    if not match:
        return {}, text

    metadata: Metadata = {}
    for raw_line in (match.group("block") or "").split("\n"):
        line = raw_line.rstrip("\r")
        parsed = _LINE_PATTERN.match(line)
        if not parsed:
            continue
        metadata[parsed.group(1)] = _parse_value(parsed.group(2))

    return metadata, text[match.end():]


def format_front_matter(metadata: Metadata) -> str:
    """Render ``metadata`` as a block that :func:`parse_front_matter` reads back."""
    lines: List[str] = ["---"]
    for key, value in metadata.items():
        if isinstance(value, list):
            lines.append(f"{key}: [{', '.join(value)}]")
        else:
            lines.append(f"{key}: {_format_scalar(value)}")
    lines.append("---")
    return "\n".join(lines) + "\n"


def _parse_value(raw: str) -> MetadataValue:
    value = _EDGE_QUOTES.sub("", raw.strip())
    if value.startswith("[") and value.endswith("]"):
        return split_list(value[1:-1])
    return value


def split_list(inner: str) -> List[str]:
    """Split a comma separated list body, dropping quotes and empty items."""
    items = (_ANY_QUOTE.sub("", part).strip() for part in inner.split(","))
    return [item for item in items if item]


def _format_scalar(value: str) -> str:
    if not value or value[0] in "'\"" or value[-1] in "'\"" or value != value.strip():
        return f'"{value}"'
    return value


__all__ = ["format_front_matter", "has_front_matter", "parse_front_matter", "split_list"]
