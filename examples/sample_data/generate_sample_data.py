"""Generate a realistic shared list of movies, shows, games, notes and places."""

import json
import random
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Dict, List

from universal_search.models.item import ContentType, MediaStatus
from universal_search.models.records import MediaRecord, NoteRecord, PlaceRecord, PlaceCategory

USERS = ["Z", "T"]


def generate_media(count: int = 30) -> List[MediaRecord]:
    """Generate sample movies, shows and games."""
    catalog = [
        (ContentType.MOVIE, "The Dark Knight", "2008-07-18", ["Action", "Crime", "Drama"],
         "Batman faces the Joker, a criminal mastermind who plunges Gotham into anarchy."),
        (ContentType.MOVIE, "Inception", "2010-07-16", ["Action", "Science Fiction"],
         "A thief who steals corporate secrets through dream-sharing technology."),
        (ContentType.MOVIE, "Interstellar", "2014-11-07", ["Adventure", "Drama", "Science Fiction"],
         "Explorers travel through a wormhole in space to ensure humanity's survival."),
        (ContentType.MOVIE, "Spirited Away", "2001-07-20", ["Animation", "Family", "Fantasy"],
         "A girl wanders into a world ruled by gods, witches and spirits."),
        (ContentType.MOVIE, "Arrival", "2016-11-11", ["Drama", "Science Fiction"],
         "A linguist works to communicate with visitors from another world."),
        (ContentType.TV, "Breaking Bad", "2008-01-20", ["Crime", "Drama"],
         "A chemistry teacher turns to manufacturing crime."),
        (ContentType.TV, "The Bear", "2022-06-23", ["Comedy", "Drama"],
         "A young chef returns home to run his family's sandwich shop."),
        (ContentType.TV, "Severance", "2022-02-18", ["Drama", "Mystery", "Science Fiction"],
         "Office workers have their work and personal memories surgically divided."),
        (ContentType.GAME, "Hades", "2020-09-17", ["Action", "Roguelike"],
         "Battle out of the underworld in this rogue-like dungeon crawler."),
        (ContentType.GAME, "Stardew Valley", "2016-02-26", ["Simulation", "RPG"],
         "Inherit your grandfather's old farm plot in Stardew Valley."),
        (ContentType.GAME, "It Takes Two", "2021-03-26", ["Adventure", "Co-op"],
         "A couple turned into dolls must work together to get back to their bodies."),
    ]

    media = []
    base_date = datetime.now() - timedelta(days=365)

    for i in range(count):
        content_type, title, release_date, genres, overview = catalog[i % len(catalog)]
        status = random.choice(list(MediaStatus))
        ratings = {}
        if status == MediaStatus.COMPLETED:
            ratings = {user: random.choice([None, 3, 4, 5]) for user in USERS}
        created_at = base_date + timedelta(days=random.randint(0, 365))

        media.append(MediaRecord(
            id=f"media_{i + 1:03d}",
            type=content_type,
            title=title if i < len(catalog) else f"{title} ({i // len(catalog) + 1})",
            status=status,
            ratings=ratings,
            genres=list(genres),
            release_date=release_date,
            overview=overview,
            created_by=random.choice(USERS),
            created_at=created_at,
            watch_date=created_at + timedelta(days=7) if status == MediaStatus.COMPLETED else None
        ))

    return media


def generate_notes(count: int = 10) -> List[NoteRecord]:
    """Generate sample notes left for each other."""
    notes = [
        ("Movie night ideas", "Watch Inception again and try the new ramen place.", ["plans"]),
        ("Groceries", "Eggs, milk, coffee beans, miso paste.", ["errands"]),
        ("Anniversary", "Book the cabin and find a cafe nearby.", ["plans", "dates"]),
        ("Game night", "Finish It Takes Two chapter 4.", ["games"]),
        ("Reminder", "Return the library books before Friday.", ["errands"]),
    ]

    return [
        NoteRecord(
            id=f"note_{i + 1:03d}",
            title=notes[i % len(notes)][0],
            content=notes[i % len(notes)][1],
            tags=list(notes[i % len(notes)][2]),
            read=random.random() < 0.6,
            archived=random.random() < 0.2,
            created_by=random.choice(USERS),
            created_at=datetime.now() - timedelta(days=random.randint(0, 90))
        )
        for i in range(count)
    ]


def generate_places(count: int = 10) -> List[PlaceRecord]:
    """Generate sample places to go together."""
    places = [
        ("Ramen Ya", PlaceCategory.RESTAURANT, "Spicy miso is great"),
        ("Blue Bottle Coffee", PlaceCategory.CAFE, ""),
        ("The Night Owl", PlaceCategory.BAR, "Trivia on Tuesdays"),
        ("Botanical Garden", PlaceCategory.PARK, "Cherry blossoms in April"),
        ("Science Museum", PlaceCategory.ATTRACTION, "Planetarium show"),
    ]

    result = []
    for i in range(count):
        name, category, notes = places[i % len(places)]
        visited = random.random() < 0.5
        result.append(PlaceRecord(
            id=f"place_{i + 1:03d}",
            name=name,
            category=category,
            notes=notes,
            visited=visited,
            rating=random.choice([3, 4, 5]) if visited else None,
            created_by=random.choice(USERS)
        ))
    return result


def generate_store_records(seed: int = 42) -> List[Dict[str, Any]]:
    """Generate the whole collection as plain store records."""
    random.seed(seed)

    items = [
        *(record.to_searchable_item() for record in generate_media()),
        *(record.to_searchable_item() for record in generate_notes()),
        *(record.to_searchable_item() for record in generate_places()),
    ]

    return [
        {
            "id": item.id,
            "type": item.type.value,
            "title": item.title,
            "content": item.content,
            "tags": list(item.tags),
            "genres": list(item.genres),
            "status": item.status.value if item.status else None,
            "rating": item.rating,
            "year": item.year,
            "createdBy": item.created_by,
            "visited": item.visited,
            "archived": item.archived,
            "read": item.read
        }
        for item in items
    ]


def save_sample_records(output_dir: Path) -> Path:
    """Write sample store records to ``sample_records.json``."""
    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / "sample_records.json"

    records = generate_store_records()
    with open(output_file, "w") as f:
        json.dump(records, f, indent=2)

    print(f"Generated {len(records)} sample records in {output_file}")
    return output_file


if __name__ == "__main__":
    save_sample_records(Path(__file__).parent)
