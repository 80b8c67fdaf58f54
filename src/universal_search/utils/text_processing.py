"""Text processing utilities for searchable items."""

import re
from typing import Iterable, List

from ..models.item import SearchableItem


class TextProcessor:
    """Text helpers shared by the match engine and the search results."""

    def __init__(self):
        """Initialize text processor patterns."""
        self.whitespace_pattern = re.compile(r'\s+')

    def build_haystack(self, item: SearchableItem) -> str:
        """
        Compose the lowercase searchable text of an item.

        Args:
            item: Item to index

        Returns:
            Title, content, tags and genres joined by single spaces
        """
        parts = [item.title, item.content or "", *item.tags, *item.genres]
        return " ".join(parts).lower()

    def normalize(self, text: str) -> str:
        """Lowercase and collapse whitespace."""
        if not text:
            return ""
        return self.whitespace_pattern.sub(' ', text.lower()).strip()

    def find_matched_terms(self, haystack: str, terms: Iterable[str]) -> List[str]:
        """Return the terms that occur in the haystack, in order, without repeats."""
        matched = []
        for term in terms:
            if term and term in haystack and term not in matched:
                matched.append(term)
        return matched

    def generate_context_snippet(
        self,
        text: str,
        query_terms: List[str],
        max_length: int = 120
    ) -> str:
        """
        Generate context snippet around query terms.

        Args:
            text: Full item text
            query_terms: Terms to find context for
            max_length: Maximum snippet length

        Returns:
            Excerpt of the text covering as many query terms as possible
        """
        if not text or not query_terms:
            return text[:max_length] if text else ""

        text_lower = text.lower()
        query_lower = [term.lower() for term in query_terms]

        best_pos = 0
        max_matches = 0

        # Sliding window to find position with most query terms
        for i in range(0, max(len(text) - max_length, 0) + 1, 20):
            window = text_lower[i:i + max_length]
            matches = sum(1 for term in query_lower if term in window)

            if matches > max_matches:
                max_matches = matches
                best_pos = i

        start = best_pos
        end = min(best_pos + max_length, len(text))

        # Ensure we don't cut words
        if start > 0 and not text[start - 1].isspace():
            space_pos = text.find(' ', start, end)
            if space_pos > 0:
                start = space_pos + 1

        if end < len(text) and not text[end].isspace():
            space_pos = text.rfind(' ', start, end)
            if space_pos > start + max_length * 0.8:
                end = space_pos

        snippet = text[start:end].strip()
        if start > 0:
            snippet = "..." + snippet
        if end < len(text):
            snippet = snippet + "..."

        return snippet


def is_word_boundary(text: str, index: int) -> bool:
    """True at the start of ``text`` or right after a non-alphanumeric character."""
    return index == 0 or not text[index - 1].isalnum()
