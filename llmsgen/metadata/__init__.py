"""Metadata extraction for the supported source dialects."""

from .exports import extract_metadata_values, parse_metadata_export
from .front_matter import format_front_matter, has_front_matter, parse_front_matter

__all__ = [
    "extract_metadata_values",
    "format_front_matter",
    "has_front_matter",
    "parse_front_matter",
    "parse_metadata_export",
]
