"""Fuzzy subsequence matching for autocomplete and title search.

Scores are tiered so that each kind of match strictly outranks the next:

- 100: exact (case-insensitive) match, or a whitespace-only query
- 95: target starts with the query
- 85: target contains the query
- 1-80: every query character appears in order (subsequence match)
- 0: no match
"""

from typing import Callable, Iterable, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

from ..models.result import FuzzyMatchResult, FuzzyResult
from ..utils.text_processing import is_word_boundary

T = TypeVar("T")

EXACT_SCORE = 100
PREFIX_SCORE = 95
SUBSTRING_SCORE = 85
SUBSEQUENCE_BASE = 30
SUBSEQUENCE_COVERAGE_WEIGHT = 30
CONSECUTIVE_BONUS = 5
WORD_BOUNDARY_BONUS = 10
SUBSEQUENCE_MAX = 80

NO_MATCH = FuzzyMatchResult(matched=False, score=0)


def fold(text: str) -> str:
    """
    Caseless form of ``text``.

    Upper-casing first makes the result the same for ``s``, ``s.upper()``
    and ``s.lower()``; plain casefold maps dotless i to itself but its
    upper-case form to "i".
    """
    return text.upper().casefold()


def fuzzy_match(query: str, target: Optional[str]) -> FuzzyMatchResult:
    """
    Match a query against a target string.

    Args:
        query: Text typed by the user
        target: Text to match against

    Returns:
        Match flag, score (0-100) and highlight spans into ``target``
    """
    if not query:
        return NO_MATCH

    q_raw = fold(query)
    q = q_raw.strip()
    if not q:
        return FuzzyMatchResult(matched=True, score=EXACT_SCORE)

    if not target:
        return NO_MATCH

    t = fold(target)
    # Spans are only meaningful when folding kept the target's length
    aligned = len(t) == len(target)

    def spans(*ranges: Tuple[int, int]) -> Tuple[Tuple[int, int], ...]:
        return tuple(ranges) if aligned else ()

    if t == q_raw or t == q:
        return FuzzyMatchResult(True, EXACT_SCORE, spans((0, len(t))))
    if t.startswith(q):
        return FuzzyMatchResult(True, PREFIX_SCORE, spans((0, len(q))))
    index = t.find(q)
    if index >= 0:
        return FuzzyMatchResult(True, SUBSTRING_SCORE, spans((index, index + len(q))))

    positions = _subsequence_positions(q, t)
    if positions is None:
        return NO_MATCH

    bonus = 0
    last = -2
    for pos in positions:
        if pos == last + 1:
            bonus += CONSECUTIVE_BONUS
        if is_word_boundary(t, pos):
            bonus += WORD_BOUNDARY_BONUS
        last = pos

    raw_score = SUBSEQUENCE_BASE + SUBSEQUENCE_COVERAGE_WEIGHT * len(q) / len(t) + bonus
    score = int(min(SUBSEQUENCE_MAX, max(1, round(raw_score))))
    return FuzzyMatchResult(True, score, spans(*_merge_runs(positions)))


def fuzzy_score(query: str, target: Optional[str]) -> int:
    """
    Score how well ``query`` fuzzily matches ``target``.

    Examples:
        >>> fuzzy_score("breaking bad", "Breaking Bad")
        100
        >>> fuzzy_score("break", "Breaking Bad")
        95
        >>> fuzzy_score("xyz", "Breaking Bad")
        0
    """
    return fuzzy_match(query, target).score


def fuzzy_score_multi(query: str, *fields: Optional[str]) -> int:
    """Best score of ``query`` across the given fields; absent fields are skipped."""
    scores = [fuzzy_score(query, field) for field in fields if field is not None]
    return max(scores, default=0)


def fuzzy_filter(
    items: Iterable[T],
    query: str,
    key: Callable[[T], Optional[str]],
    threshold: int = 0
) -> List[FuzzyResult[T]]:
    """
    Filter and rank items by fuzzy score of their extracted key.

    Args:
        items: Candidates
        query: Text typed by the user
        key: Extracts the text to match from an item
        threshold: Results must score strictly above this

    Returns:
        Results sorted by score descending; ties keep input order. A blank
        query returns every item at score 100.
    """
    return _rank(items, query, lambda item: fuzzy_score(query, key(item)), threshold)


def fuzzy_filter_multi(
    items: Iterable[T],
    query: str,
    fields: Callable[[T], Sequence[Optional[str]]],
    threshold: int = 0
) -> List[FuzzyResult[T]]:
    """Like ``fuzzy_filter``, scoring each item by its best matching field."""
    return _rank(items, query, lambda item: fuzzy_score_multi(query, *fields(item)), threshold)


def _rank(
    items: Iterable[T],
    query: str,
    scorer: Callable[[T], int],
    threshold: int
) -> List[FuzzyResult[T]]:
    items = list(items)
    if not query.strip():
        return [FuzzyResult(item=item, score=EXACT_SCORE) for item in items]
    if not items:
        return []

    scores = np.fromiter((scorer(item) for item in items), dtype=np.int64, count=len(items))
    order = np.argsort(-scores, kind="stable")

    return [
        FuzzyResult(item=items[idx], score=int(scores[idx]))
        for idx in order
        if scores[idx] > threshold
    ]


def _subsequence_positions(query: str, target: str) -> Optional[List[int]]:
    """Greedy left-to-right positions of each query character in target."""
    positions = []
    qi = 0
    for ti, char in enumerate(target):
        if qi == len(query):
            break
        if char == query[qi]:
            positions.append(ti)
            qi += 1
    if qi < len(query):
        return None
    return positions


def _merge_runs(positions: Sequence[int]) -> List[Tuple[int, int]]:
    """Collapse sorted positions into half-open runs."""
    runs: List[Tuple[int, int]] = []
    for pos in positions:
        if runs and runs[-1][1] == pos:
            runs[-1] = (runs[-1][0], pos + 1)
        else:
            runs.append((pos, pos + 1))
    return runs
