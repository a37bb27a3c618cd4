"""Argument checks run before any request is dispatched."""

from __future__ import annotations

from .exceptions import ValidationError
from .models import ItemType


def validate_item_type(item_type: str | ItemType) -> str:
    """Return the item type as it should appear in the path (caller's spelling kept)."""
    if isinstance(item_type, ItemType):
        return item_type.value
    if not item_type:
        raise ValidationError("param is empty", param="item_type", kind=ValidationError.MISSING)
    if not ItemType.is_valid(item_type):
        raise ValidationError(
            f'param "{item_type}" is not valid', param="item_type", kind=ValidationError.INVALID
        )
    return item_type


def validate_item_number(item_number: str) -> str:
    if not item_number:
        raise ValidationError(
            "itemNumber is not specified", param="item_number", kind=ValidationError.MISSING
        )
    return item_number


def validate_item(item_type: str | ItemType, item_number: str) -> tuple[str, str]:
    return validate_item_type(item_type), validate_item_number(item_number)
