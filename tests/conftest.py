"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime
from typing import List

from universal_search.models.item import ContentType, MediaStatus, SearchableItem
from universal_search.models.records import MediaRecord
from universal_search.core.engine import UniversalSearchEngine


@pytest.fixture
def sample_items() -> List[SearchableItem]:
    """A small shared collection covering every content type."""
    return [
        SearchableItem(
            id="m1",
            type=ContentType.MOVIE,
            title="The Dark Knight",
            content="Batman faces the Joker in Gotham.",
            genres=("Action", "Crime", "Drama"),
            status=MediaStatus.COMPLETED,
            rating=5,
            year=2008,
            created_by="Z"
        ),
        SearchableItem(
            id="m2",
            type=ContentType.MOVIE,
            title="Inception",
            content="A thief who steals corporate secrets through dream-sharing technology.",
            genres=("Action", "Science Fiction"),
            status=MediaStatus.COMPLETED,
            rating=4,
            year=2010,
            created_by="T"
        ),
        SearchableItem(
            id="m3",
            type=ContentType.MOVIE,
            title="Interstellar",
            content="Explorers travel through a wormhole in space.",
            genres=("Adventure", "Drama", "Science Fiction"),
            status=MediaStatus.QUEUED,
            year=2014,
            created_by="Z"
        ),
        SearchableItem(
            id="t1",
            type=ContentType.TV,
            title="Breaking Bad",
            content="A chemistry teacher turns to crime.",
            genres=("Crime", "Drama"),
            status=MediaStatus.WATCHING,
            rating=5,
            year=2008,
            created_by="T"
        ),
        SearchableItem(
            id="g1",
            type=ContentType.GAME,
            title="Hades",
            content="Battle out of the underworld.",
            genres=("Action", "Roguelike"),
            status=MediaStatus.WATCHING,
            rating=4,
            year=2020,
            created_by="Z"
        ),
        SearchableItem(
            id="n1",
            type=ContentType.NOTE,
            title="Movie night ideas",
            content="Watch Inception again and try the new ramen place.",
            tags=("plans",),
            read=False,
            archived=False,
            created_by="Z"
        ),
        SearchableItem(
            id="n2",
            type=ContentType.NOTE,
            title="Groceries",
            content="Eggs, milk, coffee beans",
            tags=("errands",),
            read=True,
            archived=True,
            created_by="T"
        ),
        SearchableItem(
            id="p1",
            type=ContentType.PLACE,
            title="Ramen Ya",
            content="Spicy miso is great",
            tags=("restaurant",),
            rating=5,
            visited=True,
            created_by="T"
        ),
        SearchableItem(
            id="p2",
            type=ContentType.PLACE,
            title="Blue Bottle Coffee",
            tags=("cafe",),
            visited=False,
            created_by="Z"
        ),
    ]


@pytest.fixture
def engine(sample_items) -> UniversalSearchEngine:
    """Engine preloaded with the sample collection."""
    engine = UniversalSearchEngine(max_results=50)
    engine.add_items(sample_items)
    return engine


@pytest.fixture
def sample_media() -> List[MediaRecord]:
    """Library entries for filter and sort tests."""
    return [
        MediaRecord(
            id="1",
            type=ContentType.MOVIE,
            title="Inception",
            status=MediaStatus.COMPLETED,
            ratings={"Z": 5, "T": 4},
            genres=["Action", "Science Fiction"],
            release_date="2010-07-16",
            created_by="Z",
            created_at=datetime(2024, 1, 1),
            watch_date=datetime(2024, 2, 1),
            collection="Nolan"
        ),
        MediaRecord(
            id="2",
            type=ContentType.TV,
            title="Breaking Bad",
            status=MediaStatus.WATCHING,
            rating=5,
            genres=["Crime", "Drama"],
            release_date="2008-01-20",
            created_by="T",
            created_at=datetime(2024, 3, 1)
        ),
        MediaRecord(
            id="3",
            type=ContentType.GAME,
            title="Hades",
            status=MediaStatus.QUEUED,
            genres=["action", "Roguelike"],
            release_date="2020-09-17",
            created_by="Z",
            created_at=datetime(2024, 2, 1)
        ),
        MediaRecord(
            id="4",
            type=ContentType.MOVIE,
            title="Arrival",
            status=MediaStatus.QUEUED,
            created_by="T"
        ),
    ]
