"""Input validation utilities."""

from typing import List

from ..models.item import SearchableItem, ContentType
from ..core.exceptions import ValidationError


def validate_item(item: SearchableItem) -> None:
    """
    Validate searchable item object.

    Args:
        item: Item to validate

    Raises:
        ValidationError: If item is invalid
    """
    try:
        if not isinstance(item, SearchableItem):
            raise ValidationError("Invalid item type")

        if not item.id or not item.id.strip():
            raise ValidationError("Item ID is required")

        if not item.title or not item.title.strip():
            raise ValidationError(f"Item {item.id} has no title")

        # Accepts plain strings as long as they name a known content type
        ContentType(item.type)

        if item.rating is not None and item.rating < 0:
            raise ValidationError(f"Item {item.id} has a negative rating")

    except Exception as e:
        if isinstance(e, ValidationError):
            raise
        raise ValidationError(f"Item validation failed: {str(e)}")


def validate_items_batch(items: List[SearchableItem]) -> None:
    """
    Validate a batch of items.

    Args:
        items: List of items to validate

    Raises:
        ValidationError: If any item is invalid
    """
    if not items:
        raise ValidationError("Item list cannot be empty")

    # Check for duplicate IDs
    item_ids = set()
    for item in items:
        validate_item(item)

        if item.id in item_ids:
            raise ValidationError(f"Duplicate item ID found: {item.id}")
        item_ids.add(item.id)
