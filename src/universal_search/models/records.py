"""Domain records stored by the application and their search projections."""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional
from dataclasses import dataclass, field

from .item import ContentType, MediaStatus, SearchableItem, MEDIA_TYPES


class PlaceCategory(str, Enum):
    """Categories a saved place can belong to."""
    RESTAURANT = "restaurant"
    CAFE = "cafe"
    BAR = "bar"
    ATTRACTION = "attraction"
    PARK = "park"
    OTHER = "other"


def release_year(release_date: Optional[str]) -> Optional[int]:
    """Extract the year from an ISO ``YYYY-MM-DD`` release date."""
    if not release_date:
        return None
    head = release_date.split("-")[0]
    return int(head) if head.isdigit() else None


@dataclass
class MediaRecord:
    """
    A movie, show or game on the shared list.

    ``rating`` is the legacy single rating; ``ratings`` holds per-user
    ratings keyed by user id.
    """
    id: str
    type: ContentType
    title: str
    status: MediaStatus = MediaStatus.QUEUED
    rating: Optional[float] = None
    ratings: Dict[str, Optional[float]] = field(default_factory=dict)
    genres: List[str] = field(default_factory=list)
    release_date: Optional[str] = None
    overview: str = ""
    notes: str = ""
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    watch_date: Optional[datetime] = None
    collection: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate media type."""
        if self.type not in MEDIA_TYPES:
            raise ValueError(f"Invalid media type: {self.type}")

    def user_rating(self, user_id: str) -> Optional[float]:
        """Rating given by one user, falling back to the legacy rating."""
        if user_id in self.ratings:
            return self.ratings[user_id]
        return self.rating

    def average_rating(self) -> Optional[float]:
        """Mean of the per-user ratings that are set, else the legacy rating."""
        given = [r for r in self.ratings.values() if r is not None]
        if given:
            return sum(given) / len(given)
        return self.rating

    def display_rating(self) -> Optional[float]:
        return self.average_rating()

    @property
    def year(self) -> Optional[int]:
        return release_year(self.release_date)

    def to_searchable_item(self) -> SearchableItem:
        """Project to the fields the query engine scores."""
        content = " ".join(part for part in (self.overview, self.notes) if part)
        return SearchableItem(
            id=self.id,
            type=self.type,
            title=self.title,
            content=content or None,
            genres=tuple(self.genres),
            status=self.status,
            rating=self.display_rating(),
            year=self.year,
            created_by=self.created_by
        )


@dataclass
class NoteRecord:
    """A note or message left for the other person."""
    id: str
    title: str
    content: str = ""
    tags: List[str] = field(default_factory=list)
    read: Optional[bool] = None
    archived: Optional[bool] = None
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_searchable_item(self) -> SearchableItem:
        return SearchableItem(
            id=self.id,
            type=ContentType.NOTE,
            title=self.title,
            content=self.content or None,
            tags=tuple(self.tags),
            created_by=self.created_by,
            read=self.read,
            archived=self.archived
        )


@dataclass
class PlaceRecord:
    """A restaurant, cafe or other place to go together."""
    id: str
    name: str
    category: PlaceCategory = PlaceCategory.OTHER
    notes: str = ""
    visited: bool = False
    visit_dates: List[datetime] = field(default_factory=list)
    rating: Optional[float] = None
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_searchable_item(self) -> SearchableItem:
        return SearchableItem(
            id=self.id,
            type=ContentType.PLACE,
            title=self.name,
            content=self.notes or None,
            tags=(self.category.value,),
            rating=self.rating,
            created_by=self.created_by,
            visited=self.visited
        )
