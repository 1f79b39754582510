"""Parser for `export const metadata = {...}` declarations in MDX files."""

from __future__ import annotations

import re
from typing import Tuple

from ..models import Metadata
from .front_matter import split_list

# The object literal ends at the first `}` closing a line; braces are not balanced.
_EXPORT_PATTERN = re.compile(
    r"^export\s+const\s+metadata\s*=\s*(?P<object>\{.*?\});?[ \t]*(?:\r?\n|\Z)",
    re.MULTILINE | re.DOTALL,
)
_STRING_FIELDS = ("title", "description", "slug")
_FIELD_PATTERNS = {
    name: re.compile(rf"\b{name}\s*:\s*(['\"])(?P<value>.*?)\1", re.DOTALL)
    for name in _STRING_FIELDS
}
_TAGS_PATTERN = re.compile(r"\btags\s*:\s*\[(?P<items>[^\]]*)\]")


def parse_metadata_export(text: str) -> Tuple[Metadata, str]:
    """Extract metadata from an exported object literal and drop the declaration.

    Only ``title``, ``description``, ``slug`` and ``tags`` are read; any other
    property of the object is ignored.
    """
    match = _EXPORT_PATTERN.search(text)
    if not match:
        return {}, text

    metadata = extract_metadata_values(match.group("object"))
    body = text[: match.start()] + text[match.end():]
    return metadata, body


def extract_metadata_values(literal: str) -> Metadata:
    """Read the recognized fields out of a JS object literal."""
    metadata: Metadata = {}
    for name, pattern in _FIELD_PATTERNS.items():
        found = pattern.search(literal)
        if found:
            metadata[name] = found.group("value")

    tags_match = _TAGS_PATTERN.search(literal)
    if tags_match:
        tags = split_list(tags_match.group("items"))
        if tags:
            metadata["tags"] = tags
    return metadata


__all__ = ["extract_metadata_values", "parse_metadata_export"]
