"""Test universal search engine."""

import pytest

from universal_search.core.engine import UniversalSearchEngine
from universal_search.core.exceptions import SearchError, ValidationError
from universal_search.models.item import ContentType, SearchableItem
from universal_search.models.result import SearchResult


def ids(results):
    return [r.item.id for r in results]


class TestUniversalSearchEngine:
    """Test UniversalSearchEngine class."""

    def test_initialization(self):
        """Test engine initialization."""
        engine = UniversalSearchEngine(max_results=20)

        assert engine.max_results == 20
        assert engine.items == []
        assert engine.get_stats()['total_items'] == 0

    def test_add_items(self, sample_items):
        """Test adding items to the engine."""
        engine = UniversalSearchEngine()
        engine.add_items(sample_items)

        assert len(engine.items) == len(sample_items)
        assert engine.get_stats()['total_items'] == len(sample_items)

    def test_add_single_item(self, engine):
        """Test adding one item."""
        engine.add_item(SearchableItem(id="g2", type=ContentType.GAME, title="Celeste"))

        assert ids(engine.search("celeste")) == ["g2"]

    def test_add_empty_items(self):
        """Test adding empty item list."""
        engine = UniversalSearchEngine()

        with pytest.raises(ValidationError, match="Item list cannot be empty"):
            engine.add_items([])

    def test_add_duplicate_in_batch(self):
        """Test duplicate ids within one batch."""
        engine = UniversalSearchEngine()
        item = SearchableItem(id="x", type=ContentType.MOVIE, title="Up")

        with pytest.raises(ValidationError, match="Duplicate item ID found: x"):
            engine.add_items([item, item])

    def test_add_already_indexed(self, engine):
        """Test re-adding an existing id."""
        with pytest.raises(ValidationError, match="Item already indexed: m1"):
            engine.add_item(SearchableItem(id="m1", type=ContentType.MOVIE, title="Again"))

        assert engine.get_stats()['total_items'] == 9

    @pytest.mark.parametrize("item,message", [
        (SearchableItem(id="", type=ContentType.MOVIE, title="Up"), "Item ID is required"),
        (SearchableItem(id="x", type=ContentType.MOVIE, title="  "), "has no title"),
        (SearchableItem(id="x", type="book", title="Dune"), "Item validation failed"),
        (SearchableItem(id="x", type=ContentType.MOVIE, title="Up", rating=-1), "negative rating"),
        ({"id": "x"}, "Invalid item type"),
    ])
    def test_invalid_items(self, item, message):
        """Test item validation."""
        engine = UniversalSearchEngine()

        with pytest.raises(ValidationError, match=message):
            engine.add_items([item])

    def test_clear(self, engine):
        """Test clearing the engine."""
        engine.clear()

        assert engine.items == []
        assert engine.search("") == []
        assert engine.get_stats()['total_items'] == 0

    def test_search_without_items(self):
        """Test searching an empty engine."""
        assert UniversalSearchEngine().search("batman") == []


class TestSearch:
    """Test query search over the sample collection."""

    def test_empty_query_returns_everything(self, engine, sample_items):
        """Test a blank query returns every item at the base score."""
        results = engine.search("")

        assert ids(results) == [item.id for item in sample_items]
        assert all(r.score == 100 for r in results)

    def test_type_filter(self, engine):
        """Test type-only queries."""
        results = engine.search("@movie")

        assert ids(results) == ["m1", "m2", "m3"]
        assert all(r.score == 100 for r in results)

    def test_genre_term(self, engine):
        """Test terms match genres with the non-title bonus."""
        results = engine.search("drama")

        assert ids(results) == ["m1", "m3", "t1"]
        assert [r.score for r in results] == [105, 105, 105]

    def test_ranked_by_score(self, engine):
        """Test title matches outrank content matches."""
        results = engine.search("inception")

        assert ids(results) == ["m2", "n1"]
        assert [r.score for r in results] == [140, 105]
        assert [r.rank for r in results] == [1, 2]

    def test_higher_score_before_insertion_order(self, engine):
        """Test a later item with a higher score comes first."""
        results = engine.search("coffee")

        assert ids(results) == ["p2", "n2"]
        assert [r.score for r in results] == [115, 105]

    def test_place_and_note_filters(self, engine):
        """Test domain-specific filters."""
        assert ids(engine.search("@place visited:no")) == ["p2"]
        assert ids(engine.search("@note unread")) == ["n1"]
        assert ids(engine.search("@note archived:yes")) == ["n2"]

    def test_media_by_user(self, engine):
        """Test @media combined with a creator filter."""
        assert ids(engine.search("by:t @media")) == ["m2", "t1"]

    def test_exclusion(self, engine):
        """Test excluded terms drop items."""
        assert ids(engine.search("action -batman")) == ["m2", "g1"]

    def test_rating_and_year(self, engine):
        """Test numeric filters."""
        assert ids(engine.search("rating>=5 year:2008")) == ["m1", "t1"]
        assert ids(engine.search("@media year>2009 rating<5")) == ["m2", "g1"]

    def test_no_matches(self, engine):
        """Test a query nothing satisfies."""
        assert engine.search("nonexistent") == []

    def test_max_results(self, engine):
        """Test result limiting."""
        results = engine.search("", max_results=2)

        assert ids(results) == ["m1", "m2"]
        assert [r.rank for r in results] == [1, 2]

    def test_zero_limit(self, engine):
        """Test an explicit zero cap returns nothing instead of the default."""
        assert engine.search("", max_results=0) == []
        assert len(engine.search("", max_results=None)) == 9

    def test_engine_default_limit(self, sample_items):
        """Test the engine-level default cap."""
        engine = UniversalSearchEngine(max_results=3)
        engine.add_items(sample_items)

        assert len(engine.search("")) == 3

    def test_result_details(self, engine):
        """Test matched terms and snippets."""
        results = engine.search('"dark knight" batman')

        assert len(results) == 1
        result = results[0]
        assert isinstance(result, SearchResult)
        assert result.score == 125
        assert result.matched_terms == ["dark knight", "batman"]
        assert result.snippet == "Batman faces the Joker in Gotham."

    def test_snippet_falls_back_to_title(self, engine):
        """Test items without content use their title."""
        result = engine.search("@place visited:no")[0]
        assert result.snippet == "Blue Bottle Coffee"
        assert result.matched_terms == []

    def test_or_group_matched_terms(self, engine):
        """Test OR group members found in the item are reported."""
        result = engine.search("hades OR celeste")[0]
        assert result.item.id == "g1"
        assert result.matched_terms == ["hades"]

    def test_search_failure_is_wrapped(self, engine, monkeypatch):
        """Test scoring errors surface as SearchError."""
        def boom(item, query):
            raise RuntimeError("scoring exploded")

        monkeypatch.setattr("universal_search.core.engine.matches_query", boom)

        with pytest.raises(SearchError, match="scoring exploded"):
            engine.search("batman")


class TestSearchTitles:
    """Test fuzzy autocomplete."""

    def test_prefix(self, engine):
        """Test title prefix autocomplete."""
        results = engine.search_titles("inter")

        assert [r.item.id for r in results] == ["m3"]
        assert results[0].score == 95

    def test_tag_match(self, engine):
        """Test tags are matched as well as titles."""
        results = engine.search_titles("cafe")

        assert [r.item.id for r in results] == ["p2"]
        assert results[0].score == 100

    def test_subsequence(self, engine):
        """Test abbreviations match by subsequence."""
        results = engine.search_titles("brba")

        assert results[0].item.id == "t1"
        assert 0 < results[0].score < 85

    def test_threshold_and_limit(self, engine):
        """Test threshold and limit."""
        assert engine.search_titles("brba", threshold=90) == []
        assert len(engine.search_titles("", limit=4)) == 4

    def test_blank_text_returns_all(self, engine):
        """Test blank input returns every item."""
        assert len(engine.search_titles("  ")) == 9


class TestEngineHelpers:
    """Test parse, describe and statistics."""

    def test_parse(self, engine):
        """Test parsing through the engine."""
        query = engine.parse("by:t @movie batman")
        assert query.created_by == "T"
        assert query.types == (ContentType.MOVIE,)
        assert query.terms == ("batman",)

    def test_custom_users(self):
        """Test configured user identifiers."""
        engine = UniversalSearchEngine(known_users=("Alex", "Sam"))

        assert engine.parse("from:alex").created_by == "Alex"
        assert engine.parse("by:z").created_by is None
        assert engine.get_stats()['known_users'] == ["Alex", "Sam"]

    def test_describe(self, engine):
        """Test filter summaries."""
        assert engine.describe("@movie rating>=4 batman") == ["Type: movie", "Rating: ≥4"]
        assert engine.describe("batman") == []

    def test_stats(self, engine):
        """Test search statistics."""
        engine.search("batman")
        engine.search("@movie")

        stats = engine.get_stats()
        assert stats['total_items'] == 9
        assert stats['total_searches'] == 2
        assert stats['avg_search_time'] >= 0
        assert stats['max_results'] == 50
        assert stats['known_users'] == ["T", "Z"]
