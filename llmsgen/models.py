"""Core data models shared across llmsgen components."""

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Dict, List, Optional, Union

MetadataValue = Union[str, List[str]]
Metadata = Dict[str, MetadataValue]

EXTENDED_SUFFIX = ".mdx"


@dataclass(frozen=True)
class SourceFile:
    """A discovered content file, addressed relative to the content root."""

    path: str

    @property
    def is_extended(self) -> bool:
        """True for MDX sources that may embed components and imports."""
        return PurePosixPath(self.path).suffix.lower() == EXTENDED_SUFFIX


@dataclass
class ProcessedContent:
    """Extracted metadata plus the normalized body of a source file."""

    metadata: Metadata
    body: str


@dataclass
class ManifestEntry:
    """Per-file result listed in the generated index."""

    relative_path: str
    url: str
    title: str
    category: str
    description: Optional[str] = None


@dataclass
class GenerationResult:
    """Outcome of a full generation run."""

    manifest: List[ManifestEntry]
    index_path: Path
    written: List[Path] = field(default_factory=list)
