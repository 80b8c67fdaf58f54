"""Test text processing and logging helpers."""

import logging

import pytest

from universal_search.models.item import ContentType, SearchableItem
from universal_search.core.exceptions import ConfigurationError
from universal_search.utils.logging_config import StructuredLogger, resolve_level, setup_logging
from universal_search.utils.text_processing import TextProcessor, is_word_boundary


class TestTextProcessor:
    """Test TextProcessor class."""

    def setup_method(self):
        self.processor = TextProcessor()

    def test_build_haystack(self):
        """Test haystack composition."""
        item = SearchableItem(
            id="x", type=ContentType.MOVIE, title="Up",
            content="Balloons", tags=("Pixar",), genres=("Family",)
        )
        assert self.processor.build_haystack(item) == "up balloons pixar family"

    def test_normalize(self):
        assert self.processor.normalize("  Dark\n\tKnight  ") == "dark knight"
        assert self.processor.normalize("") == ""

    def test_find_matched_terms(self):
        """Test order is kept and repeats dropped."""
        haystack = "the dark knight batman"
        terms = ["batman", "joker", "dark", "batman", ""]
        assert self.processor.find_matched_terms(haystack, terms) == ["batman", "dark"]

    def test_short_text_snippet(self):
        """Test short text is returned whole."""
        assert self.processor.generate_context_snippet("Short note", ["note"]) == "Short note"
        assert self.processor.generate_context_snippet("", ["note"]) == ""

    def test_snippet_without_terms(self):
        """Test the leading text is used when there is nothing to look for."""
        text = "word " * 50
        snippet = self.processor.generate_context_snippet(text, [], max_length=20)
        assert snippet == text[:20]

    def test_snippet_centers_on_terms(self):
        """Test the snippet window moves to the matching text."""
        text = ("filler " * 40) + "the secret ramen place " + ("padding " * 40)
        snippet = self.processor.generate_context_snippet(text, ["ramen"], max_length=60)

        assert "ramen" in snippet
        assert snippet.startswith("...")
        assert snippet.endswith("...")
        assert len(snippet) <= 66


class TestWordBoundary:
    """Test word boundary detection."""

    def test_boundaries(self):
        text = "star-wars the_movie"
        assert is_word_boundary(text, 0)
        assert is_word_boundary(text, 5)
        assert is_word_boundary(text, 10)
        assert is_word_boundary(text, 14)
        assert not is_word_boundary(text, 1)
        assert not is_word_boundary(text, 11)


class TestLogging:
    """Test logging helpers."""

    def test_setup_logging_level(self):
        setup_logging(level="warning")
        assert logging.getLogger("universal_search").level == logging.WARNING

        setup_logging(level="INFO", include_timestamp=False)
        assert logging.getLogger("universal_search").level == logging.INFO

    def test_structured_logger_context(self):
        """Test context is appended and layered."""
        base = StructuredLogger("universal_search.test")
        child = base.with_context(query="dark").with_context(count=3)

        assert base.context == {}
        assert child.context == {"query": "dark", "count": 3}
        assert child._format_message("done") == "done [query=dark count=3]"
        assert base._format_message("done") == "done"

    def test_unknown_level(self):
        """Test unknown level names are rejected."""
        with pytest.raises(ConfigurationError, match="Unknown log level: LOUD"):
            setup_logging(level="LOUD")

        assert resolve_level("debug") == logging.DEBUG

    def test_context_quotes_text_with_spaces(self):
        """Test multi-word values stay readable."""
        log = StructuredLogger("universal_search.test").with_context(query="dark knight", empty="")
        assert log._format_message("done") == "done [query='dark knight' empty='']"

    def test_timed(self, caplog):
        """Test timed blocks log their context and elapsed time."""
        caplog.set_level(logging.DEBUG, logger="universal_search.test")
        log = StructuredLogger("universal_search.test").with_context(query="dark")

        with log.timed("Search completed") as context:
            context['results'] = 2

        assert len(caplog.records) == 1
        message = caplog.records[0].getMessage()
        assert message.startswith("Search completed [query=dark results=2 elapsed=")
        assert message.endswith("s]")
