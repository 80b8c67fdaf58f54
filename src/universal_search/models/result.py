"""Search result data models."""

from typing import Any, Dict, Generic, List, Tuple, TypeVar
from dataclasses import dataclass, field

from .item import ContentType, SearchableItem

T = TypeVar("T")


@dataclass
class SearchResult:
    """
    Universal search result with relevance scoring and context.

    Attributes:
        item: The matched item
        score: Relevance score (positive, higher is better)
        rank: Result ranking position (1-based)
        matched_terms: Query terms and phrases found in the item
        snippet: Short excerpt of the item text
    """
    item: SearchableItem
    score: int
    rank: int
    matched_terms: List[str] = field(default_factory=list)
    snippet: str = ""

    def __post_init__(self) -> None:
        """Validate search result."""
        if self.score <= 0:
            raise ValueError("Score must be positive")
        if self.rank <= 0:
            raise ValueError("Rank must be positive")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "item": {
                "id": self.item.id,
                "type": ContentType(self.item.type).value,
                "title": self.item.title,
                "tags": list(self.item.tags),
                "genres": list(self.item.genres),
            },
            "score": self.score,
            "rank": self.rank,
            "matched_terms": self.matched_terms,
            "snippet": self.snippet
        }


@dataclass(frozen=True)
class FuzzyMatchResult:
    """
    Outcome of fuzzy matching a query against one target string.

    Attributes:
        matched: Whether the query matched
        score: Match quality (0-100)
        highlight_ranges: Half-open (start, end) spans of matched characters
    """
    matched: bool
    score: int
    highlight_ranges: Tuple[Tuple[int, int], ...] = ()


@dataclass(frozen=True)
class FuzzyResult(Generic[T]):
    """An item ranked by fuzzy score."""
    item: T
    score: int
