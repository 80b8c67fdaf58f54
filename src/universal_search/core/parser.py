"""
Query language parser for universal search.

Supported syntax:
- Type tags: @movie, @tv, @game, @note, @place, @media (and plural/synonym forms)
- Quoted phrases: "exact phrase"
- Negation: -word or NOT word
- OR groups: word1 OR word2 OR word3
- Numeric comparisons: rating>4, rating>=3, rating<=2, rating4, year2020, year>2015
  (rating:4, rating=4, year:2020 and year=2020 are also accepted as exact
  matches, in addition to the bare operator-less form)
- Status filters: status:completed, status:queue
- User filters: by:Z, from:T
- Genre, place and note filters: genre:drama, visited:yes, archived:no, unread
  (visited:/archived: are true only for yes, true or 1)
"""

import logging
import re
from typing import Dict, Iterable, List, Optional

from ..models.item import ContentType, MediaStatus, DEFAULT_USERS, MEDIA_TYPES
from ..models.query import ParsedQuery, EMPTY_QUERY

logger = logging.getLogger(__name__)

MEDIA_TAG = "@media"

TYPE_ALIASES: Dict[str, ContentType] = {
    "@movie": ContentType.MOVIE,
    "@movies": ContentType.MOVIE,
    "@film": ContentType.MOVIE,
    "@films": ContentType.MOVIE,
    "@tv": ContentType.TV,
    "@show": ContentType.TV,
    "@shows": ContentType.TV,
    "@series": ContentType.TV,
    "@game": ContentType.GAME,
    "@games": ContentType.GAME,
    "@note": ContentType.NOTE,
    "@notes": ContentType.NOTE,
    "@message": ContentType.NOTE,
    "@messages": ContentType.NOTE,
    "@place": ContentType.PLACE,
    "@places": ContentType.PLACE,
    "@location": ContentType.PLACE,
    "@locations": ContentType.PLACE,
}

STATUS_ALIASES: Dict[str, MediaStatus] = {
    "queued": MediaStatus.QUEUED,
    "queue": MediaStatus.QUEUED,
    "watching": MediaStatus.WATCHING,
    "playing": MediaStatus.WATCHING,
    "in-progress": MediaStatus.WATCHING,
    "inprogress": MediaStatus.WATCHING,
    "completed": MediaStatus.COMPLETED,
    "done": MediaStatus.COMPLETED,
    "finished": MediaStatus.COMPLETED,
    "dropped": MediaStatus.DROPPED,
    "abandoned": MediaStatus.DROPPED,
}

# Any other value, including an empty one, means False
TRUTHY_VALUES = frozenset({"yes", "true", "1"})

OR_KEYWORD = "OR"
NOT_KEYWORD = "not"


class QueryParser:
    """
    Best-effort parser turning a search box string into a ParsedQuery.

    Unrecognized or malformed tokens become plain search terms; parsing
    never raises.
    """

    def __init__(self, known_users: Iterable[str] = DEFAULT_USERS):
        """
        Initialize parser.

        Args:
            known_users: User identifiers accepted by ``by:``/``from:``
        """
        self.known_users = {user.lower(): user for user in known_users}

        self.quoted_pattern = re.compile(r'"([^"]+)"')
        # Two-character operators are listed first so ">=" never splits into ">" + "=4"
        self.rating_pattern = re.compile(r'^rating(>=|<=|>|<|=|:)?([0-9]+)$')
        self.year_pattern = re.compile(r'^year(>=|<=|>|<|=|:)?([0-9]{4})$')

    def parse(self, raw: str) -> ParsedQuery:
        """
        Parse a raw query string.

        Args:
            raw: Search box contents

        Returns:
            Structured query; ``EMPTY_QUERY`` for blank input
        """
        if not raw or not raw.strip():
            return EMPTY_QUERY

        state = _ParseState()

        for match in self.quoted_pattern.finditer(raw):
            state.exact_phrases.append(match.group(1).lower())
        tokens = self.quoted_pattern.sub(" ", raw).split()

        i = 0
        while i < len(tokens):
            i = self._consume(tokens, i, state)

        query = state.build()
        logger.debug(f"Parsed query {raw!r} into {query}")
        return query

    def _consume(self, tokens: List[str], i: int, state: "_ParseState") -> int:
        """Classify the token at ``i`` and return the index of the next one."""
        token = tokens[i]
        lower = token.lower()

        if lower == MEDIA_TAG:
            state.include_all_media = True
            return i + 1

        if lower in TYPE_ALIASES:
            content_type = TYPE_ALIASES[lower]
            if content_type not in state.types:
                state.types.append(content_type)
            return i + 1

        if lower.startswith("status:"):
            status = STATUS_ALIASES.get(lower[len("status:"):])
            if status is not None:
                state.fields["status"] = status
            return i + 1

        if lower.startswith("by:") or lower.startswith("from:"):
            user = self.known_users.get(lower.split(":", 1)[1])
            if user is not None:
                state.fields["created_by"] = user
            return i + 1

        rating_match = self.rating_pattern.match(lower)
        if rating_match:
            op, value = rating_match.group(1), int(rating_match.group(2))
            if op == ">":
                state.fields["min_rating"] = value + 1
            elif op == ">=":
                state.fields["min_rating"] = value
            elif op == "<":
                state.fields["max_rating"] = value - 1
            elif op == "<=":
                state.fields["max_rating"] = value
            else:
                state.fields["min_rating"] = value
                state.fields["max_rating"] = value
            return i + 1

        year_match = self.year_pattern.match(lower)
        if year_match:
            op, value = year_match.group(1), int(year_match.group(2))
            if op == ">":
                state.fields["year_min"] = value + 1
            elif op == ">=":
                state.fields["year_min"] = value
            elif op == "<":
                state.fields["year_max"] = value - 1
            elif op == "<=":
                state.fields["year_max"] = value
            else:
                state.fields["year"] = value
            return i + 1

        if lower.startswith("genre:"):
            genre = lower[len("genre:"):]
            if genre:
                state.fields["genre"] = genre
            return i + 1

        for flag in ("visited", "archived"):
            prefix = f"{flag}:"
            if lower.startswith(prefix):
                state.fields[flag] = lower[len(prefix):] in TRUTHY_VALUES
                return i + 1

        if lower in ("unread", "is:unread"):
            state.fields["unread"] = True
            return i + 1

        if lower == NOT_KEYWORD and i + 1 < len(tokens):
            state.exclude_terms.append(tokens[i + 1].lower())
            return i + 2
        if lower.startswith("-") and len(lower) > 1:
            state.exclude_terms.append(lower[1:])
            return i + 1

        if not _is_or(token) and i + 2 < len(tokens) and _is_or(tokens[i + 1]):
            return self._consume_or_group(tokens, i, state)

        if _is_or(token):
            # Connector without operands on both sides
            return i + 1

        state.terms.append(lower)
        return i + 1

    def _consume_or_group(self, tokens: List[str], i: int, state: "_ParseState") -> int:
        """Collect ``a OR b OR c`` starting at ``i``."""
        group = [tokens[i].lower()]
        i += 2
        while i < len(tokens):
            if _is_or(tokens[i]):
                i += 1
                continue
            group.append(tokens[i].lower())
            if i + 2 < len(tokens) and _is_or(tokens[i + 1]):
                i += 2
            else:
                i += 1
                break

        if len(group) > 1:
            state.or_groups.append(tuple(group))
        else:
            state.terms.append(group[0])
        return i


def _is_or(token: str) -> bool:
    return token.upper() == OR_KEYWORD


class _ParseState:
    """Mutable accumulator for one parse call."""

    def __init__(self) -> None:
        self.terms: List[str] = []
        self.exact_phrases: List[str] = []
        self.exclude_terms: List[str] = []
        self.or_groups: List[tuple] = []
        self.types: List[ContentType] = []
        self.fields: Dict[str, object] = {}
        self.include_all_media = False

    def build(self) -> ParsedQuery:
        types = tuple(self.types)
        if self.include_all_media and not types:
            types = MEDIA_TYPES
        return ParsedQuery(
            terms=tuple(self.terms),
            exact_phrases=tuple(self.exact_phrases),
            exclude_terms=tuple(self.exclude_terms),
            or_groups=tuple(self.or_groups),
            types=types,
            **self.fields
        )


def parse_query(raw: str, known_users: Optional[Iterable[str]] = None) -> ParsedQuery:
    """
    Parse a universal search query string.

    Args:
        raw: Search box contents
        known_users: Override for the user identifiers ``by:`` accepts

    Returns:
        Structured query
    """
    parser = QueryParser(known_users) if known_users is not None else QueryParser()
    return parser.parse(raw)
