"""Utility modules for universal search."""

from .text_processing import TextProcessor, is_word_boundary
from .validators import validate_item, validate_items_batch
from .logging_config import setup_logging, StructuredLogger

__all__ = [
    "TextProcessor",
    "is_word_boundary",
    "validate_item",
    "validate_items_batch",
    "setup_logging",
    "StructuredLogger",
]
