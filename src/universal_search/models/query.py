"""Parsed query data model."""

from typing import Optional, Tuple
from dataclasses import dataclass

from .item import ContentType, MediaStatus


TEXT_FIELDS = ("terms", "exact_phrases", "exclude_terms", "or_groups", "types")
FILTER_FIELDS = (
    "status", "created_by", "genre", "min_rating", "max_rating", "year",
    "year_min", "year_max", "visited", "archived", "unread",
)


@dataclass(frozen=True)
class ParsedQuery:
    """
    Structured form of a universal search query string.

    Text criteria are lowercase and kept in order of appearance. Every
    optional filter is None when the query did not set it.

    Attributes:
        terms: Required terms (AND)
        exact_phrases: Quoted phrases that must appear verbatim
        exclude_terms: Terms that must not appear
        or_groups: Groups where at least one member must appear
        types: Content types to restrict to (empty = all)
        status: Media status filter
        created_by: Creator filter
        genre: Genre substring filter
        min_rating: Inclusive lower rating bound
        max_rating: Inclusive upper rating bound
        year: Exact release year
        year_min: Inclusive lower year bound
        year_max: Inclusive upper year bound
        visited: Places visited flag
        archived: Notes archived flag
        unread: Only unread notes
    """
    terms: Tuple[str, ...] = ()
    exact_phrases: Tuple[str, ...] = ()
    exclude_terms: Tuple[str, ...] = ()
    or_groups: Tuple[Tuple[str, ...], ...] = ()
    types: Tuple[ContentType, ...] = ()
    status: Optional[MediaStatus] = None
    created_by: Optional[str] = None
    genre: Optional[str] = None
    min_rating: Optional[int] = None
    max_rating: Optional[int] = None
    year: Optional[int] = None
    year_min: Optional[int] = None
    year_max: Optional[int] = None
    visited: Optional[bool] = None
    archived: Optional[bool] = None
    unread: Optional[bool] = None

    @property
    def is_empty(self) -> bool:
        """
        True when the query carries no criteria at all.

        Text criteria count when non-empty, filters count when not None.
        """
        if any(getattr(self, name) for name in TEXT_FIELDS):
            return False
        return all(getattr(self, name) is None for name in FILTER_FIELDS)


EMPTY_QUERY = ParsedQuery()
