"""Content tree discovery with gitignore-style exclusion patterns."""

from __future__ import annotations

import os
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence

from .config import DEFAULT_EXCLUDES
from .logging import get_logger
from .models import SourceFile

SOURCE_SUFFIXES: tuple[str, ...] = (".md", ".mdx")


@dataclass
class IgnoreRule:
    """Represents one exclusion pattern such as ``drafts/``, ``out/**`` or ``*.tmp.md``."""

    pattern: str
    directory_only: bool
    anchored: bool
    negate: bool
    has_slash: bool

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if not self.pattern:
            return False

        if self.pattern.endswith("/**"):
            prefix = self.pattern[:-3]
            if is_dir and fnmatchcase(rel_path, prefix):
                return True

        if self.directory_only and not is_dir:
            return False

        if self.anchored or self.has_slash:
            return fnmatchcase(rel_path, self.pattern)

        for part in rel_path.split("/"):
            if fnmatchcase(part, self.pattern):
                return True
        return False


def build_ignore_rule(pattern: str) -> IgnoreRule | None:
    pattern = pattern.strip()
    negate = pattern.startswith("!")
    if negate:
        pattern = pattern[1:]
    if not pattern:
        return None

    directory_only = pattern.endswith("/")
    if directory_only:
        pattern = pattern[:-1]

    anchored = pattern.startswith("/")
    if anchored:
        pattern = pattern[1:]

    return IgnoreRule(
        pattern=pattern,
        directory_only=directory_only,
        anchored=anchored,
        negate=negate,
        has_slash="/" in pattern,
    )


def _should_ignore(rel_path: str, is_dir: bool, rules: Sequence[IgnoreRule]) -> bool:
    ignored = False
    for rule in rules:
        if rule.matches(rel_path, is_dir):
            ignored = not rule.negate
    return ignored


def _iter_sources(root: Path, rules: Sequence[IgnoreRule]) -> Iterator[str]:
    for dirpath, dirnames, filenames in os.walk(root):
        current_dir = Path(dirpath)
        rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

        kept_dirs = []
        for name in sorted(dirnames):
            if name.startswith("."):
                continue
            rel_path = f"{rel_dir}/{name}" if rel_dir else name
            if _should_ignore(rel_path, True, rules):
                continue
            kept_dirs.append(name)
        dirnames[:] = kept_dirs

        for filename in sorted(filenames):
            if filename.startswith(".") or not filename.endswith(SOURCE_SUFFIXES):
                continue
            rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
            if _should_ignore(rel_path, False, rules):
                continue
            yield rel_path


class ContentScanner:
    """Walks a content root and lists its Markdown and MDX sources."""

    def __init__(self, ignore_patterns: Iterable[str] | None = None) -> None:
        patterns = DEFAULT_EXCLUDES if ignore_patterns is None else tuple(ignore_patterns)
        self.rules: List[IgnoreRule] = [
            rule for rule in (build_ignore_rule(pattern) for pattern in patterns) if rule is not None
        ]
        self.logger = get_logger("scanner")

    def scan(self, root: str | Path) -> List[SourceFile]:
        """Return sources in traversal order, files of a directory before its subdirectories."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Content directory not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Content path is not a directory: {root}")

        sources = [SourceFile(path=rel_path) for rel_path in _iter_sources(root_path, self.rules)]
        self.logger.debug("Discovered %d source files under %s", len(sources), root_path)
        return sources


__all__ = ["ContentScanner", "IgnoreRule", "SOURCE_SUFFIXES", "build_ignore_rule"]
