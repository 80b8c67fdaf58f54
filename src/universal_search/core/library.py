"""
Media library filtering and sorting.

Backs the library view, where the couple narrows the shared list down
to something to watch or play tonight.
"""

from enum import Enum
from typing import Dict, List, Optional, Union
from dataclasses import dataclass, field

from ..models.item import ContentType, MediaStatus
from ..models.records import MediaRecord
from ..models.result import FuzzyResult
from .fuzzy import fuzzy_filter

ALL = "all"


class SortField(str, Enum):
    DATE_ADDED = "date_added"
    TITLE = "title"
    RATING = "rating"
    RELEASE_DATE = "release_date"
    WATCH_DATE = "watch_date"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass
class MediaFilters:
    """
    Library filter selection.

    ``"all"``, an empty genre list and None each mean "no restriction".
    """
    status: Union[MediaStatus, str] = ALL
    type: Union[ContentType, str] = ALL
    genres: List[str] = field(default_factory=list)
    added_by: str = ALL
    has_rating: Optional[bool] = None
    release_decade: Optional[int] = None
    has_collection: Optional[bool] = None


@dataclass
class SortConfig:
    field: SortField = SortField.DATE_ADDED
    direction: SortDirection = SortDirection.DESC


SORT_LABELS: Dict[SortField, str] = {
    SortField.DATE_ADDED: "Added",
    SortField.TITLE: "Title",
    SortField.RATING: "Rating",
    SortField.RELEASE_DATE: "Released",
    SortField.WATCH_DATE: "Watched",
}


def decade_of(year: int) -> int:
    return year // 10 * 10


def _matches(item: MediaRecord, filters: MediaFilters) -> bool:
    if filters.status != ALL and item.status != filters.status:
        return False

    if filters.type != ALL and item.type != filters.type:
        return False

    if filters.genres:
        wanted = {g.lower() for g in filters.genres}
        if not any(g.lower() in wanted for g in item.genres):
            return False

    if filters.added_by != ALL and item.created_by != filters.added_by:
        return False

    if filters.has_rating is not None:
        is_rated = item.display_rating() is not None
        if filters.has_rating != is_rated:
            return False

    if filters.release_decade is not None:
        year = item.year
        if year is None or decade_of(year) != filters.release_decade:
            return False

    if filters.has_collection is not None:
        if filters.has_collection != (item.collection is not None):
            return False

    return True


def apply_filters(media: List[MediaRecord], filters: MediaFilters) -> List[MediaRecord]:
    """Keep the media matching every active filter (AND across dimensions)."""
    return [item for item in media if _matches(item, filters)]


def _sort_key(sort_field: SortField):
    if sort_field == SortField.TITLE:
        return lambda item: item.title.casefold()
    if sort_field == SortField.RATING:
        return lambda item: item.display_rating() or 0
    if sort_field == SortField.RELEASE_DATE:
        return lambda item: item.release_date or ""
    if sort_field == SortField.WATCH_DATE:
        return lambda item: item.watch_date.timestamp() if item.watch_date else 0.0
    return lambda item: item.created_at.timestamp() if item.created_at else 0.0


def apply_sort(media: List[MediaRecord], sort: SortConfig) -> List[MediaRecord]:
    """Return a sorted copy; ties keep their original order."""
    return sorted(
        media,
        key=_sort_key(SortField(sort.field)),
        reverse=SortDirection(sort.direction) == SortDirection.DESC
    )


def extract_genres(media: List[MediaRecord]) -> List[str]:
    """Unique genres across the library, alphabetical."""
    return sorted({genre for item in media for genre in item.genres})


def extract_decades(media: List[MediaRecord]) -> List[int]:
    """Unique release decades, newest first."""
    return sorted({decade_of(item.year) for item in media if item.year is not None}, reverse=True)


def count_active_filters(filters: MediaFilters) -> int:
    """Count filter dimensions that differ from the defaults."""
    return sum([
        filters.status != ALL,
        filters.type != ALL,
        bool(filters.genres),
        filters.added_by != ALL,
        filters.has_rating is not None,
        filters.release_decade is not None,
        filters.has_collection is not None,
    ])


def has_active_filters(filters: MediaFilters) -> bool:
    return count_active_filters(filters) > 0


def format_decade(decade: int) -> str:
    return f"{decade}s"


def get_sort_label(sort: SortConfig) -> str:
    """Short label such as ``Added ↓``."""
    arrow = "↑" if SortDirection(sort.direction) == SortDirection.ASC else "↓"
    return f"{SORT_LABELS[SortField(sort.field)]} {arrow}"


def search_library(
    media: List[MediaRecord],
    text: str,
    threshold: int = 0
) -> List[FuzzyResult[MediaRecord]]:
    """Rank library entries by fuzzy title match."""
    return fuzzy_filter(media, text, key=lambda item: item.title, threshold=threshold)
