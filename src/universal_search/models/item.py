"""Searchable item data model with validation."""

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple
from dataclasses import dataclass
from pydantic import BaseModel, Field, field_validator


class ContentType(str, Enum):
    """Kinds of content the universal search runs over."""
    MOVIE = "movie"
    TV = "tv"
    GAME = "game"
    NOTE = "note"
    PLACE = "place"


MEDIA_TYPES: Tuple[ContentType, ...] = (ContentType.MOVIE, ContentType.TV, ContentType.GAME)


class MediaStatus(str, Enum):
    """Watch/play progress of a media entry."""
    QUEUED = "queued"
    WATCHING = "watching"
    COMPLETED = "completed"
    DROPPED = "dropped"


DEFAULT_USERS: Tuple[str, ...] = ("Z", "T")


@dataclass(frozen=True)
class SearchableItem:
    """
    Read-only projection of a stored record used for query scoring.

    Attributes:
        id: Record identifier
        type: Content type tag
        title: Display title (name for places)
        content: Optional free text (overview, note body, place notes)
        tags: Free-form tags
        genres: Genre names
        status: Media progress status
        rating: Rating, None when unrated
        year: Release year
        created_by: Identifier of the user who added the record
        visited: Places only
        archived: Notes only
        read: Notes only
    """
    id: str
    type: ContentType
    title: str
    content: Optional[str] = None
    tags: Tuple[str, ...] = ()
    genres: Tuple[str, ...] = ()
    status: Optional[MediaStatus] = None
    rating: Optional[float] = None
    year: Optional[int] = None
    created_by: Optional[str] = None
    visited: Optional[bool] = None
    archived: Optional[bool] = None
    read: Optional[bool] = None


class SearchableItemModel(BaseModel):
    """Pydantic model for validating raw records before projection."""

    id: str = Field(..., min_length=1, description="Record identifier")
    type: ContentType = Field(..., description="Content type")
    title: str = Field(..., description="Display title")
    content: Optional[str] = Field(None, description="Free text content")
    tags: List[str] = Field(default_factory=list, description="Tags")
    genres: List[str] = Field(default_factory=list, description="Genres")
    status: Optional[MediaStatus] = Field(None, description="Media status")
    rating: Optional[float] = Field(None, ge=0, description="Rating")
    year: Optional[int] = Field(None, description="Release year")
    created_by: Optional[str] = Field(None, alias="createdBy", description="Creator id")
    visited: Optional[bool] = None
    archived: Optional[bool] = None
    read: Optional[bool] = None

    model_config = {"populate_by_name": True}

    @field_validator('title')
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Ensure title is not just whitespace."""
        if not v.strip():
            raise ValueError('Title cannot be empty or whitespace only')
        return v.strip()

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "SearchableItemModel":
        """Validate a raw store record."""
        return cls.model_validate(record)

    def to_item(self) -> SearchableItem:
        """Convert to SearchableItem dataclass."""
        return SearchableItem(
            id=self.id,
            type=self.type,
            title=self.title,
            content=self.content,
            tags=tuple(self.tags),
            genres=tuple(self.genres),
            status=self.status,
            rating=self.rating,
            year=self.year,
            created_by=self.created_by,
            visited=self.visited,
            archived=self.archived,
            read=self.read
        )
