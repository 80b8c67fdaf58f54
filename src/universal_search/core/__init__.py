"""Core engine components for universal search."""

from .engine import UniversalSearchEngine
from .parser import QueryParser, parse_query
from .matcher import matches_query, has_search_criteria, get_filter_summary
from .fuzzy import fuzzy_match, fuzzy_score, fuzzy_score_multi, fuzzy_filter, fuzzy_filter_multi
from .exceptions import (
    UniversalSearchError,
    SearchError,
    ValidationError,
    ConfigurationError
)

__all__ = [
    "UniversalSearchEngine",
    "QueryParser",
    "parse_query",
    "matches_query",
    "has_search_criteria",
    "get_filter_summary",
    "fuzzy_match",
    "fuzzy_score",
    "fuzzy_score_multi",
    "fuzzy_filter",
    "fuzzy_filter_multi",
    "UniversalSearchError",
    "SearchError",
    "ValidationError",
    "ConfigurationError"
]
