"""Display title and description resolution for processed documents."""

from __future__ import annotations

import re
from pathlib import PurePosixPath
from typing import Mapping, Optional

_HEADING_PATTERN = re.compile(r"^#[ \t]+(\S.*)$", re.MULTILINE)
# A line that does not open with `#` and runs past 50 characters; only the first 201 are kept.
_PARAGRAPH_PATTERN = re.compile(r"^([^\n#].{50,200})", re.MULTILINE)
_WORD_START = re.compile(r"\b\w")
_NEWLINES = re.compile(r"\s*\n\s*")

DESCRIPTION_LIMIT = 200


def resolve_title(path: str, metadata: Mapping[str, object], body: str) -> str:
    """Return the metadata title, the first H1, or a title built from the filename."""
    title = metadata.get("title")
    if isinstance(title, str) and title.strip():
        return title.strip()

    heading = _HEADING_PATTERN.search(body)
    if heading:
        return heading.group(1).strip()

    return title_from_filename(path)


def title_from_filename(path: str) -> str:
    """Turn ``guides/getting-started.mdx`` into ``Getting Started``."""
    name = PurePosixPath(path.replace("\\", "/")).name
    stem = PurePosixPath(name).stem
    spaced = re.sub(r"[-_]", " ", stem)
    title = _WORD_START.sub(lambda match: match.group(0).upper(), spaced).strip()
    return title or name or path


def resolve_description(metadata: Mapping[str, object], body: str) -> Optional[str]:
    """Return the metadata description or the first paragraph-like line, else None."""
    description = metadata.get("description")
    if isinstance(description, str) and description.strip():
        return description.strip()

    for match in _PARAGRAPH_PATTERN.finditer(body):
        candidate = _NEWLINES.sub(" ", match.group(1).strip())
        if candidate:
            return candidate[:DESCRIPTION_LIMIT]
    return None


__all__ = ["DESCRIPTION_LIMIT", "resolve_description", "resolve_title", "title_from_filename"]
