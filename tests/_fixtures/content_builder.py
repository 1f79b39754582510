"""Helper utilities for constructing temporary content trees in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping

from llmsgen.config import GeneratorConfig


class ContentBuilder:
    """Writes MD/MDX sources into a throwaway content root next to an output root."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "content"
        self.root.mkdir()
        self.output = tmp_path / "public"

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the content root."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def config(self, **options: object) -> GeneratorConfig:
        """Return a config pointing at this builder's directories."""
        return GeneratorConfig(content_dir=self.root, output_dir=self.output, **options)  # type: ignore[arg-type]

    def read_output(self, relative: str) -> str:
        return (self.output / relative).read_text(encoding="utf-8")


__all__ = ["ContentBuilder"]
