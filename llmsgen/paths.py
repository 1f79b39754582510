"""Output path, site URL and category computation for content files."""

from __future__ import annotations

import re
from pathlib import PurePosixPath
from typing import Sequence

DEFAULT_LOCALES: tuple[str, ...] = ("en", "ru")
DEFAULT_CATEGORY = "other"
URL_PREFIX = "/md/"

_INDEX_STEMS = {"index", "_index"}
_EXTENSION_PATTERN = re.compile(r"\.(mdx|md)$")


def _to_posix(relative_path: str) -> str:
    return relative_path.replace("\\", "/").lstrip("/")


class PathNormalizer:
    """Maps source paths such as ``posts/a/index.en.mdx`` to ``posts/a/a.md``."""

    def __init__(self, locales: Sequence[str] = DEFAULT_LOCALES) -> None:
        self.locales = tuple(locales)
        self._locale_pattern: re.Pattern[str] | None = None
        if self.locales:
            alternatives = "|".join(re.escape(locale) for locale in self.locales)
            self._locale_pattern = re.compile(rf"(?:\.(?:{alternatives}))+\.(mdx|md)$")

    def category(self, relative_path: str) -> str:
        parts = PurePosixPath(_to_posix(relative_path)).parts
        if len(parts) < 2:
            return DEFAULT_CATEGORY
        return parts[0]

    def url_path(self, relative_path: str) -> str:
        normalized = _to_posix(relative_path)
        if self._locale_pattern is not None:
            normalized = self._locale_pattern.sub(r".\1", normalized)
        normalized = _EXTENSION_PATTERN.sub(".md", normalized)

        path = PurePosixPath(normalized)
        if path.stem in _INDEX_STEMS and path.parent.name:
            path = path.parent / f"{path.parent.name}.md"
        return path.as_posix()

    def site_url(self, relative_path: str) -> str:
        return f"{URL_PREFIX}{self.url_path(relative_path)}"


_DEFAULT = PathNormalizer()


def category(relative_path: str) -> str:
    """Top-level directory of ``relative_path``, or ``"other"`` at the content root."""
    return _DEFAULT.category(relative_path)


def url_path(relative_path: str) -> str:
    """Output path below ``md/`` using the default locale suffixes."""
    return _DEFAULT.url_path(relative_path)


def site_url(relative_path: str) -> str:
    return _DEFAULT.site_url(relative_path)


__all__ = [
    "DEFAULT_CATEGORY",
    "DEFAULT_LOCALES",
    "PathNormalizer",
    "URL_PREFIX",
    "category",
    "site_url",
    "url_path",
]
