"""Pipeline orchestration for a full llms.txt generation run."""

from __future__ import annotations

from pathlib import Path

from .config import GeneratorConfig
from .content_scanner import ContentScanner
from .index.builder import IndexBuilder
from .logging import get_logger
from .models import GenerationResult
from .paths import PathNormalizer
from .postproc.markup import MarkupStripper
from .processor import OUTPUT_SUBDIR, CorpusProcessor


class Orchestrator:
    """Validates directories, then runs discovery, processing and index rendering."""

    def __init__(
        self,
        scanner: ContentScanner | None = None,
        stripper: MarkupStripper | None = None,
    ) -> None:
        self._scanner_override = scanner
        self.stripper = stripper or MarkupStripper()
        self.logger = get_logger("orchestrator")

    def run(self, config: GeneratorConfig) -> GenerationResult:
        """Regenerate ``md/`` and ``llms.txt`` under the configured output directory."""
        content_dir = Path(config.content_dir).expanduser().resolve()
        output_dir = Path(config.output_dir).expanduser().resolve()

        if not content_dir.exists():
            raise FileNotFoundError(f"Content directory not found: {content_dir}")
        if not content_dir.is_dir():
            raise NotADirectoryError(f"Content path is not a directory: {content_dir}")

        self.logger.info("Generating llms.txt from %s into %s", content_dir, output_dir)
        (output_dir / OUTPUT_SUBDIR).mkdir(parents=True, exist_ok=True)

        scanner = self._scanner_override or ContentScanner(config.ignore_patterns)
        sources = scanner.scan(content_dir)
        self.logger.debug("Scanner discovered %d files", len(sources))

        processor = CorpusProcessor(
            content_dir,
            output_dir,
            normalizer=PathNormalizer(config.locales),
            stripper=self.stripper,
        )
        manifest = processor.process(sources)

        builder = IndexBuilder(
            config.project_name,
            config.project_description,
            base_url=config.base_url,
            templates_dir=config.templates_dir,
        )
        index_path = builder.write(manifest, output_dir)

        self.logger.info("Processed %d documents", len(manifest))
        return GenerationResult(manifest=manifest, index_path=index_path, written=list(processor.written))


__all__ = ["Orchestrator"]
