"""Removal of embedded components and import statements from MDX bodies."""

from __future__ import annotations

import re


class MarkupStripper:
    """Drops capitalized JSX components and ES module imports, leaving prose."""

    # Opening and closing tags share a name; same-name nesting is not balanced.
    _PAIRED_PATTERN = re.compile(
        r"<(?P<tag>[A-Z][\w.]*)(?=[\s/>])[^>]*(?<!/)>.*?</(?P=tag)\s*>",
        re.DOTALL,
    )
    _SELF_CLOSING_PATTERN = re.compile(r"<[A-Z][\w.]*[^>]*/>")
    _IMPORT_PATTERN = re.compile(
        r"^import[ \t].*?\bfrom[ \t]*['\"][^'\"\n]+['\"];?[ \t]*(?:\r?\n|\Z)",
        re.MULTILINE,
    )

    def strip(self, text: str) -> str:
        text = self._PAIRED_PATTERN.sub("", text)
        text = self._SELF_CLOSING_PATTERN.sub("", text)
        return self._IMPORT_PATTERN.sub("", text)


def strip_markup(text: str) -> str:
    """Module-level shortcut for :meth:`MarkupStripper.strip`."""
    return MarkupStripper().strip(text)


__all__ = ["MarkupStripper", "strip_markup"]
