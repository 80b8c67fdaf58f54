"""
Universal Search for a shared movies, shows, games, notes and places list.

Parses free-form queries with filter tokens, scores items with a
filter-then-bonus model and ranks titles with a fuzzy subsequence matcher.
"""

from .api.service import UniversalSearchService, SearchSettings
from .models.item import ContentType, MediaStatus, SearchableItem
from .models.query import ParsedQuery
from .models.result import SearchResult, FuzzyMatchResult, FuzzyResult
from .core.engine import UniversalSearchEngine
from .core.parser import parse_query
from .core.matcher import matches_query, has_search_criteria, get_filter_summary
from .core.fuzzy import fuzzy_match, fuzzy_score, fuzzy_score_multi, fuzzy_filter

__version__ = "1.0.0"

__all__ = [
    "UniversalSearchService",
    "SearchSettings",
    "UniversalSearchEngine",
    "ContentType",
    "MediaStatus",
    "SearchableItem",
    "ParsedQuery",
    "SearchResult",
    "FuzzyMatchResult",
    "FuzzyResult",
    "parse_query",
    "matches_query",
    "has_search_criteria",
    "get_filter_summary",
    "fuzzy_match",
    "fuzzy_score",
    "fuzzy_score_multi",
    "fuzzy_filter",
]
