"""Universal search engine combining the query parser and match engine."""

import logging
import time
from typing import Dict, Any, Iterable, List, Optional

import numpy as np

from ..models.item import SearchableItem, DEFAULT_USERS
from ..models.query import ParsedQuery
from ..models.result import SearchResult, FuzzyResult
from ..utils.validators import validate_items_batch
from ..utils.text_processing import TextProcessor
from .fuzzy import fuzzy_filter_multi
from .matcher import matches_query, get_filter_summary
from .parser import QueryParser
from .exceptions import SearchError, ValidationError

logger = logging.getLogger(__name__)


class UniversalSearchEngine:
    """
    In-memory universal search over movies, shows, games, notes and places.

    Holds the candidate items supplied by the caller, parses each query
    once and scores every candidate with the match engine.
    """

    def __init__(
        self,
        known_users: Iterable[str] = DEFAULT_USERS,
        max_results: int = 50
    ):
        """
        Initialize universal search engine.

        Args:
            known_users: User identifiers accepted by ``by:``/``from:``
            max_results: Default cap on returned results
        """
        self.max_results = max_results
        self.parser = QueryParser(known_users)
        self.text_processor = TextProcessor()

        self._items: List[SearchableItem] = []
        self._ids: set = set()

        # State tracking
        self._stats = {
            'total_items': 0,
            'total_searches': 0,
            'avg_search_time': 0.0
        }

        logger.info("Universal search engine initialized")

    @property
    def items(self) -> List[SearchableItem]:
        """Copy of the candidate items, in insertion order."""
        return list(self._items)

    def add_item(self, item: SearchableItem) -> None:
        """
        Add a single item to the candidate list.

        Raises:
            ValidationError: If item is invalid or its id is already present
        """
        self.add_items([item])

    def add_items(self, items: List[SearchableItem]) -> None:
        """
        Add multiple items to the candidate list.

        Args:
            items: Items to add

        Raises:
            ValidationError: If any item is invalid or duplicates an existing id
        """
        validate_items_batch(items)

        for item in items:
            if item.id in self._ids:
                raise ValidationError(f"Item already indexed: {item.id}")

        self._items.extend(items)
        self._ids.update(item.id for item in items)
        self._stats['total_items'] = len(self._items)

        logger.info(f"Added {len(items)} items to search engine")

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()
        self._ids.clear()
        self._stats['total_items'] = 0

    def parse(self, raw: str) -> ParsedQuery:
        """
        Parse a query string with this engine's known users.

        Args:
            raw: Query string

        Returns:
            Structured query
        """
        return self.parser.parse(raw)

    def search(self, raw: str, max_results: Optional[int] = None) -> List[SearchResult]:
        """
        Search items with a universal search query.

        Args:
            raw: Query string, e.g. ``@movie rating>4 "dark knight" -batman``
            max_results: Cap on returned results (engine default when None)

        Returns:
            Matching items ranked by score, best first; ties keep insertion order

        Raises:
            SearchError: If scoring fails
        """
        start_time = time.perf_counter()
        limit = self.max_results if max_results is None else max_results
        query = self.parser.parse(raw)

        try:
            results = self._rank(query, limit)
        except Exception as e:
            logger.error(f"Search failed for {raw!r}: {str(e)}")
            raise SearchError(f"Search failed: {str(e)}")

        search_time = time.perf_counter() - start_time
        self._update_search_stats(search_time)

        logger.debug(f"Search {raw!r}: {len(results)} results in {search_time:.4f}s")
        return results

    def _rank(self, query: ParsedQuery, limit: int) -> List[SearchResult]:
        if not self._items:
            return []

        scores = np.fromiter(
            (matches_query(item, query) for item in self._items),
            dtype=np.int64,
            count=len(self._items)
        )
        matched = np.flatnonzero(scores > 0)
        if len(matched) == 0:
            return []

        ordered = matched[np.argsort(-scores[matched], kind="stable")][:limit]

        wanted = [*query.exact_phrases, *query.terms]
        for group in query.or_groups:
            wanted.extend(group)

        results = []
        for rank, idx in enumerate(ordered, 1):
            item = self._items[idx]
            haystack = self.text_processor.build_haystack(item)
            results.append(SearchResult(
                item=item,
                score=int(scores[idx]),
                rank=rank,
                matched_terms=self.text_processor.find_matched_terms(haystack, wanted),
                snippet=self.text_processor.generate_context_snippet(
                    item.content or item.title, wanted
                )
            ))
        return results

    def search_titles(
        self,
        text: str,
        threshold: int = 0,
        limit: Optional[int] = None
    ) -> List[FuzzyResult[SearchableItem]]:
        """
        Fuzzy autocomplete over item titles and tags.

        Args:
            text: Partial text typed by the user
            threshold: Results must score above this
            limit: Cap on returned results

        Returns:
            Items ranked by best fuzzy score of title or any tag
        """
        results = fuzzy_filter_multi(
            self._items,
            text,
            fields=lambda item: (item.title, *item.tags),
            threshold=threshold
        )
        return results[:limit] if limit is not None else results

    def describe(self, raw: str) -> List[str]:
        """Human-readable summary of the filters in a query."""
        return get_filter_summary(self.parser.parse(raw))

    def _update_search_stats(self, search_time: float) -> None:
        """Update search performance statistics."""
        self._stats['total_searches'] += 1

        # Update rolling average
        total_searches = self._stats['total_searches']
        current_avg = self._stats['avg_search_time']
        self._stats['avg_search_time'] = (
            (current_avg * (total_searches - 1) + search_time) / total_searches
        )

    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        return {
            **self._stats,
            'max_results': self.max_results,
            'known_users': sorted(self.parser.known_users.values())
        }
