"""High-level API service for universal search."""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator

from ..core.engine import UniversalSearchEngine
from ..core.exceptions import UniversalSearchError, ConfigurationError
from ..models.item import SearchableItem, SearchableItemModel, DEFAULT_USERS
from ..models.result import SearchResult, FuzzyResult
from ..utils.logging_config import setup_logging, StructuredLogger, LOG_LEVELS

logger = logging.getLogger(__name__)

Record = Union[SearchableItem, Mapping[str, Any]]


class SearchSettings(BaseModel):
    """Validated service configuration."""

    known_users: Tuple[str, ...] = Field(DEFAULT_USERS, min_length=1, description="User ids for by:/from:")
    max_results: int = Field(50, ge=1, le=1000, description="Maximum results per search")
    fuzzy_threshold: int = Field(0, ge=0, le=100, description="Minimum autocomplete score")
    log_level: str = Field("INFO", description="Logging level")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


class UniversalSearchService:
    """
    Service interface for universal search over the shared collection.

    Accepts store records as plain mappings or ready-made SearchableItems,
    and wraps engine failures in UniversalSearchError.
    """

    def __init__(self, **settings: Any):
        """
        Initialize universal search service.

        Args:
            **settings: Fields of SearchSettings (known_users, max_results,
                fuzzy_threshold, log_level)

        Raises:
            ConfigurationError: If settings are invalid
        """
        try:
            self.settings = SearchSettings(**settings)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid search settings: {e}")

        setup_logging(level=self.settings.log_level)

        self.engine = UniversalSearchEngine(
            known_users=self.settings.known_users,
            max_results=self.settings.max_results
        )
        self._log = StructuredLogger(__name__).with_context(
            max_results=self.settings.max_results
        )
        self._open = True
        logger.info("Universal search service initialized")

    def add_records(self, records: List[Record]) -> None:
        """
        Add store records to the searchable collection.

        Args:
            records: SearchableItems or raw mappings validated by SearchableItemModel

        Raises:
            UniversalSearchError: If a record is invalid
        """
        self._check_open()

        try:
            items = [self._to_item(record) for record in records]
            self.engine.add_items(items)
            self._log.with_context(count=len(items)).info("Records added")

        except PydanticValidationError as e:
            logger.error(f"Invalid record: {str(e)}")
            raise UniversalSearchError(f"Invalid record: {str(e)}")
        except UniversalSearchError as e:
            logger.error(f"Failed to add {len(records)} records: {str(e)}")
            raise

    def replace_records(self, records: List[Record]) -> None:
        """Swap the whole collection, e.g. after a store snapshot."""
        self._check_open()
        self.engine.clear()
        if records:
            self.add_records(records)

    def search(self, text: str, max_results: Optional[int] = None) -> List[SearchResult]:
        """
        Run a universal search query.

        Args:
            text: Search box contents
            max_results: Optional cap overriding the configured one

        Returns:
            Ranked results
        """
        self._check_open()
        with self._log.with_context(query=text).timed("Search completed") as context:
            results = self.engine.search(text, max_results=max_results)
            context['results'] = len(results)
        return results

    def autocomplete(self, text: str, limit: int = 10) -> List[FuzzyResult[SearchableItem]]:
        """Fuzzy title/tag suggestions for partially typed text."""
        self._check_open()
        return self.engine.search_titles(
            text,
            threshold=self.settings.fuzzy_threshold,
            limit=limit
        )

    def describe(self, text: str) -> List[str]:
        """Active filter labels for the query, for display above the results."""
        return self.engine.describe(text)

    def get_stats(self) -> Dict[str, Any]:
        """Get service and engine statistics."""
        return {
            'service': {
                'open': self._open,
                'fuzzy_threshold': self.settings.fuzzy_threshold,
                'log_level': self.settings.log_level
            },
            'engine': self.engine.get_stats()
        }

    def close(self) -> None:
        """Drop the collection and refuse further calls."""
        self.engine.clear()
        self._open = False
        logger.info("Service closed")

    def _check_open(self) -> None:
        if not self._open:
            raise UniversalSearchError("Service is closed")

    @staticmethod
    def _to_item(record: Record) -> SearchableItem:
        if isinstance(record, SearchableItem):
            return record
        return SearchableItemModel.from_record(dict(record)).to_item()

    @classmethod
    @contextmanager
    def create(cls, records: Optional[List[Record]] = None, **settings: Any) -> Iterator["UniversalSearchService"]:
        """
        Create a service, optionally preloaded, and close it on exit.

        Args:
            records: Initial records
            **settings: Service configuration

        Yields:
            Ready universal search service
        """
        service = cls(**settings)
        try:
            if records:
                service.add_records(records)
            yield service
        finally:
            service.close()
