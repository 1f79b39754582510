"""llms.txt index generation."""

from .builder import INDEX_FILENAME, IndexBuilder, group_by_category

__all__ = ["INDEX_FILENAME", "IndexBuilder", "group_by_category"]
