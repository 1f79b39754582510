"""Body post-processing helpers."""

from .markup import MarkupStripper, strip_markup

__all__ = ["MarkupStripper", "strip_markup"]
