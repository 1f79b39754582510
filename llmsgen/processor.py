"""Per-file extraction, normalization and Markdown output."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List

from .logging import get_logger
from .metadata import has_front_matter, parse_front_matter, parse_metadata_export
from .models import ManifestEntry, ProcessedContent, SourceFile
from .paths import PathNormalizer
from .postproc.markup import MarkupStripper
from .resolver import resolve_description, resolve_title

OUTPUT_SUBDIR = "md"


class ProcessingError(RuntimeError):
    """Raised when a source file cannot be read or its output cannot be written."""

    def __init__(self, relative_path: str, message: str) -> None:
        super().__init__(f"{relative_path}: {message}")
        self.relative_path = relative_path


def extract_content(
    text: str, *, extended: bool, stripper: MarkupStripper | None = None
) -> ProcessedContent:
    """Split ``text`` into metadata and a trimmed Markdown body.

    Front matter is tried first for both dialects. Extended (MDX) sources fall
    back to an exported metadata object and lose their components and imports.
    """
    metadata, body = parse_front_matter(text)
    if extended:
        if not has_front_matter(text):
            metadata, body = parse_metadata_export(text)
        body = (stripper or MarkupStripper()).strip(body)
    return ProcessedContent(metadata=metadata, body=body.strip())


class CorpusProcessor:
    """Turns discovered sources into Markdown files and manifest entries."""

    def __init__(
        self,
        content_root: Path,
        output_root: Path,
        *,
        normalizer: PathNormalizer | None = None,
        stripper: MarkupStripper | None = None,
    ) -> None:
        self.content_root = Path(content_root)
        self.output_root = Path(output_root)
        self.normalizer = normalizer or PathNormalizer()
        self.stripper = stripper or MarkupStripper()
        self.logger = get_logger("processor")
        self.written: List[Path] = []
        self._owners: Dict[str, str] = {}

    def process(self, sources: Iterable[SourceFile]) -> List[ManifestEntry]:
        """Process ``sources`` in order, returning one manifest entry per file."""
        self.written = []
        self._owners = {}
        manifest: List[ManifestEntry] = []
        for source in sources:
            manifest.append(self.process_file(source))
        return manifest

    def process_file(self, source: SourceFile) -> ManifestEntry:
        text = self._read(source)
        content = extract_content(text, extended=source.is_extended, stripper=self.stripper)

        url_path = self.normalizer.url_path(source.path)
        entry = ManifestEntry(
            relative_path=source.path,
            url=self.normalizer.site_url(source.path),
            title=resolve_title(source.path, content.metadata, content.body),
            category=self.normalizer.category(source.path),
            description=resolve_description(content.metadata, content.body),
        )

        previous = self._owners.get(url_path)
        if previous is not None and previous != source.path:
            self.logger.warning(
                "%s and %s both map to md/%s; keeping the later file", previous, source.path, url_path
            )
        self._owners[url_path] = source.path

        self._write(source, url_path, content.body)
        self.logger.debug("Processed %s -> %s (%s)", source.path, entry.url, entry.category)
        return entry

    def _read(self, source: SourceFile) -> str:
        path = self.content_root / source.path
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ProcessingError(source.path, f"failed to read source: {exc}") from exc

    def _write(self, source: SourceFile, url_path: str, body: str) -> None:
        target = self.output_root / OUTPUT_SUBDIR / url_path
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(body, encoding="utf-8")
        except OSError as exc:
            raise ProcessingError(source.path, f"failed to write {target}: {exc}") from exc
        self.written.append(target)


__all__ = ["CorpusProcessor", "OUTPUT_SUBDIR", "ProcessingError", "extract_content"]
