"""Basic usage example for universal search."""

import json
from pathlib import Path

from universal_search import UniversalSearchService
from universal_search.core.library import (
    MediaFilters,
    SortConfig,
    SortField,
    apply_filters,
    apply_sort,
    get_sort_label,
)
from universal_search.models.item import ContentType

from sample_data.generate_sample_data import generate_media, save_sample_records


def load_sample_records(data_file: Path) -> list:
    """Load sample store records from JSON file."""
    with open(data_file) as f:
        return json.load(f)


def basic_search_demo():
    """Demonstrate universal search and autocomplete."""
    print("🔍 Universal Search - Basic Usage Demo")
    print("=" * 50)

    sample_data_file = Path(__file__).parent / "sample_data" / "sample_records.json"
    if not sample_data_file.exists():
        print("   Generating sample data...")
        save_sample_records(sample_data_file.parent)

    records = load_sample_records(sample_data_file)

    print("\n1. Initializing search service...")
    with UniversalSearchService.create(records, log_level="WARNING") as service:
        stats = service.get_stats()
        print(f"   Collection contains {stats['engine']['total_items']} items")

        print("\n2. Performing searches...")
        search_examples = [
            ("dark", "Anything mentioning 'dark'"),
            ('@movie rating>4 "dark knight" -batman', "Highly rated movies with a phrase, excluding a term"),
            ("@media by:t status:done", "Media T finished"),
            ("@place visited:no", "Places we still have to try"),
            ("@note unread", "Unread notes"),
            ("action OR adventure year>2015", "Recent action or adventure"),
        ]

        for query_text, description in search_examples:
            print(f"\n   Query: '{query_text}' ({description})")
            filters = service.describe(query_text)
            if filters:
                print(f"   Filters: {' | '.join(filters)}")

            results = service.search(query_text, max_results=3)
            if results:
                print(f"   Found {len(results)} results:")
                for result in results:
                    print(f"     {result.rank}. [{result.item.type.value}] {result.item.title}"
                          f" - Score: {result.score}")
                    if result.matched_terms:
                        print(f"        Matched terms: {', '.join(result.matched_terms)}")
            else:
                print("   No results found")

        print("\n3. Autocomplete...")
        for partial in ["inc", "brba", "cafe"]:
            suggestions = service.autocomplete(partial, limit=3)
            titles = ", ".join(f"{s.item.title} ({s.score})" for s in suggestions)
            print(f"   '{partial}' -> {titles or 'no suggestions'}")

        final_stats = service.get_stats()
        print(f"\n   Total searches performed: {final_stats['engine']['total_searches']}")
        print(f"   Average search time: {final_stats['engine']['avg_search_time']:.4f}s")

    print("\n4. Library view...")
    media = generate_media(count=11)
    filters = MediaFilters(type=ContentType.MOVIE, genres=["Science Fiction"])
    sort = SortConfig(field=SortField.TITLE)
    print(f"   Sci-fi movies, sorted by {get_sort_label(sort)}:")
    for item in apply_sort(apply_filters(media, filters), sort):
        print(f"     - {item.title} ({item.year})")

    print("\n✅ Demo completed successfully!")


if __name__ == "__main__":
    basic_search_demo()
