"""Renders the llms.txt index from a processed manifest."""

from __future__ import annotations

import unicodedata
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from jinja2 import Environment, FileSystemLoader

from ..logging import get_logger
from ..models import ManifestEntry

INDEX_FILENAME = "llms.txt"
TEMPLATE_NAME = "llms.txt.j2"


def group_by_category(manifest: Iterable[ManifestEntry]) -> Dict[str, List[ManifestEntry]]:
    """Bucket entries by category, keeping categories in first-seen order."""
    grouped: Dict[str, List[ManifestEntry]] = {}
    for entry in manifest:
        grouped.setdefault(entry.category, []).append(entry)
    return grouped


def title_sort_key(title: str) -> tuple[str, str, str]:
    """Case- and accent-insensitive ordering; lowercase wins ties, as in ICU collation."""
    folded = title.casefold()
    base = "".join(
        char for char in unicodedata.normalize("NFKD", folded) if not unicodedata.combining(char)
    )
    return base, folded, title.swapcase()


def category_heading(category: str) -> str:
    return category[:1].upper() + category[1:]


class IndexBuilder:
    """Groups manifest entries by category and renders them through a jinja2 template."""

    def __init__(
        self,
        project_name: str,
        project_description: str,
        *,
        base_url: str = "",
        templates_dir: Path | None = None,
    ) -> None:
        self.project_name = project_name
        self.project_description = project_description
        self.base_url = base_url
        self._env = self._create_env(templates_dir)
        self.logger = get_logger("index")

    def render(self, manifest: Sequence[ManifestEntry]) -> str:
        categories = [
            {
                "title": category_heading(category),
                "entries": [
                    {
                        "title": entry.title,
                        "url": f"{self.base_url}{entry.url}",
                        "description": entry.description,
                    }
                    for entry in sorted(entries, key=lambda item: title_sort_key(item.title))
                ],
            }
            for category, entries in group_by_category(manifest).items()
        ]
        template = self._env.get_template(TEMPLATE_NAME)
        return template.render(
            project_name=self.project_name,
            project_description=self.project_description,
            categories=categories,
        )

    def write(self, manifest: Sequence[ManifestEntry], output_dir: Path) -> Path:
        """Render the index and write it to ``output_dir/llms.txt``."""
        target = Path(output_dir) / INDEX_FILENAME
        target.write_text(self.render(manifest), encoding="utf-8")
        self.logger.info("Wrote index with %d entries to %s", len(manifest), target)
        return target

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(Path(__file__).with_name("templates")))
        loader = FileSystemLoader(directories)
        return Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )


__all__ = [
    "INDEX_FILENAME",
    "IndexBuilder",
    "category_heading",
    "group_by_category",
    "title_sort_key",
]
