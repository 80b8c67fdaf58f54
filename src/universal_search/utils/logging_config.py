"""Logging configuration for universal search."""

import logging
import sys
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from ..core.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_level(level: str) -> int:
    """
    Map a level name to its logging constant.

    Raises:
        ConfigurationError: If the name is not a standard level
    """
    name = level.upper()
    if name not in LOG_LEVELS:
        raise ConfigurationError(f"Unknown log level: {level}")
    return getattr(logging, name)


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    include_timestamp: bool = True
) -> None:
    """
    Set up logging for the universal search package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string
        include_timestamp: Whether to include timestamps

    Raises:
        ConfigurationError: If the level is unknown
    """
    numeric_level = resolve_level(level)

    if format_string is None:
        format_string = "%(name)s - %(levelname)s - %(message)s"
        if include_timestamp:
            format_string = "%(asctime)s - " + format_string

    logging.basicConfig(
        level=numeric_level,
        format=format_string,
        stream=sys.stdout,
        force=True
    )
    logging.getLogger("universal_search").setLevel(numeric_level)

    # numpy is only used for ranking
    logging.getLogger("numpy").setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(f"Logging configured with level: {level.upper()}")


class StructuredLogger:
    """Logger that appends ``key=value`` context to every message."""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)
        self.context: Dict[str, Any] = {}

    def with_context(self, **kwargs) -> 'StructuredLogger':
        """Return a logger carrying extra context."""
        new_logger = StructuredLogger(self.logger.name)
        new_logger.context = {**self.context, **kwargs}
        return new_logger

    def _format_message(self, message: str) -> str:
        if not self.context:
            return message

        # Queries contain spaces; quote them so the pairs stay parseable
        pairs = [
            f"{k}={v!r}" if isinstance(v, str) and (not v or any(c.isspace() for c in v)) else f"{k}={v}"
            for k, v in self.context.items()
        ]
        return f"{message} [{' '.join(pairs)}]"

    def debug(self, message: str) -> None:
        self.logger.debug(self._format_message(message))

    def info(self, message: str) -> None:
        self.logger.info(self._format_message(message))

    def warning(self, message: str) -> None:
        self.logger.warning(self._format_message(message))

    def error(self, message: str) -> None:
        self.logger.error(self._format_message(message))

    @contextmanager
    def timed(self, message: str) -> Iterator[Dict[str, Any]]:
        """
        Log ``message`` at DEBUG with the elapsed time once the block exits.

        Yields:
            Dict whose entries are added to the logged context
        """
        extra: Dict[str, Any] = {}
        start = time.perf_counter()
        yield extra
        elapsed = time.perf_counter() - start
        self.with_context(**extra, elapsed=f"{elapsed:.4f}s").debug(message)
