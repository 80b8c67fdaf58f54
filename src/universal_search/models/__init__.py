"""Data models for universal search."""

from .item import ContentType, MediaStatus, SearchableItem, SearchableItemModel
from .query import ParsedQuery
from .result import SearchResult, FuzzyMatchResult, FuzzyResult
from .records import MediaRecord, NoteRecord, PlaceRecord, PlaceCategory

__all__ = [
    "ContentType",
    "MediaStatus",
    "SearchableItem",
    "SearchableItemModel",
    "ParsedQuery",
    "SearchResult",
    "FuzzyMatchResult",
    "FuzzyResult",
    "MediaRecord",
    "NoteRecord",
    "PlaceRecord",
    "PlaceCategory",
]
