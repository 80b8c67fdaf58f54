"""Filter-then-bonus scoring of searchable items against parsed queries."""

from typing import List, Optional

from ..models.item import SearchableItem
from ..models.query import ParsedQuery
from ..utils.text_processing import TextProcessor


BASE_SCORE = 100
PHRASE_BONUS = 20
TITLE_TERM_BONUS = 15
TERM_BONUS = 5
OR_GROUP_BONUS = 10
TITLE_PREFIX_BONUS = 25

_text_processor = TextProcessor()


def matches_query(item: SearchableItem, query: ParsedQuery) -> int:
    """
    Score an item against a parsed query.

    Hard filters run first and exclude the item outright. Text criteria
    are then checked against the item's haystack; missing required text
    excludes the item, present text adds bonuses on top of the base score.

    Args:
        item: Candidate item
        query: Parsed query

    Returns:
        0 when the item is excluded, otherwise a positive score
    """
    if not passes_filters(item, query):
        return 0

    haystack = _text_processor.build_haystack(item)
    title = item.title.lower()
    score = BASE_SCORE

    for phrase in query.exact_phrases:
        if phrase not in haystack:
            return 0
        score += PHRASE_BONUS

    for term in query.exclude_terms:
        if term in haystack:
            return 0

    for term in query.terms:
        if term not in haystack:
            return 0
        score += TITLE_TERM_BONUS if term in title else TERM_BONUS

    for group in query.or_groups:
        if not any(term in haystack for term in group):
            return 0
        score += OR_GROUP_BONUS

    if query.terms and title.startswith(query.terms[0]):
        score += TITLE_PREFIX_BONUS

    return score


def passes_filters(item: SearchableItem, query: ParsedQuery) -> bool:
    """Check every hard filter of the query, in order."""
    if query.types and item.type not in query.types:
        return False

    if query.status is not None and item.status != query.status:
        return False

    if query.created_by is not None and item.created_by != query.created_by:
        return False

    if query.min_rating is not None and (item.rating is None or item.rating < query.min_rating):
        return False
    if query.max_rating is not None and (item.rating is None or item.rating > query.max_rating):
        return False

    if query.year is not None and item.year != query.year:
        return False
    if query.year_min is not None and (item.year is None or item.year < query.year_min):
        return False
    if query.year_max is not None and (item.year is None or item.year > query.year_max):
        return False

    if query.genre is not None and not any(query.genre in genre.lower() for genre in item.genres):
        return False

    if query.visited is not None and item.visited != query.visited:
        return False

    if query.archived is not None and item.archived != query.archived:
        return False

    if query.unread and item.read is not False:
        return False

    return True


def has_search_criteria(query: ParsedQuery) -> bool:
    """Check if query has any actual search criteria."""
    return not query.is_empty


def _format_range(
    label: str,
    low: Optional[int],
    high: Optional[int]
) -> Optional[str]:
    if low is None and high is None:
        return None
    if low is not None and high is not None:
        if low == high:
            return f"{label}: {low}"
        return f"{label}: {low}-{high}"
    if low is not None:
        return f"{label}: ≥{low}"
    return f"{label}: ≤{high}"


def get_filter_summary(query: ParsedQuery) -> List[str]:
    """
    Describe the active filters of a query for display.

    Args:
        query: Parsed query

    Returns:
        Short labels in the order type, status, creator, rating, year,
        genre, visited, archived, unread
    """
    parts: List[str] = []

    if query.types:
        parts.append(f"Type: {', '.join(t.value for t in query.types)}")
    if query.status is not None:
        parts.append(f"Status: {query.status.value}")
    if query.created_by is not None:
        parts.append(f"By: {query.created_by}")

    rating = _format_range("Rating", query.min_rating, query.max_rating)
    if rating:
        parts.append(rating)

    if query.year is not None:
        parts.append(f"Year: {query.year}")
    year_range = _format_range("Year", query.year_min, query.year_max)
    if year_range:
        parts.append(year_range)

    if query.genre is not None:
        parts.append(f"Genre: {query.genre}")
    if query.visited is not None:
        parts.append(f"Visited: {'yes' if query.visited else 'no'}")
    if query.archived is not None:
        parts.append(f"Archived: {'yes' if query.archived else 'no'}")
    if query.unread:
        parts.append("Unread")

    return parts
