from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet


class ItemType(str, Enum):
    """Catalog item categories accepted by the ``/items`` endpoints."""

    MINIFIG = "MINIFIG"
    PART = "PART"
    SET = "SET"
    BOOK = "BOOK"
    GEAR = "GEAR"
    CATALOG = "CATALOG"
    INSTRUCTION = "INSTRUCTION"
    UNSORTED_LOT = "UNSORTED_LOT"
    ORIGINAL_BOX = "ORIGINAL_BOX"

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Case-insensitive membership check (``"set"`` and ``"SET"`` are both valid)."""
        return value.lower() in _ITEM_TYPE_TOKENS


_ITEM_TYPE_TOKENS: FrozenSet[str] = frozenset(member.value.lower() for member in ItemType)


@dataclass(frozen=True, slots=True)
class Credentials:
    """OAuth consumer and access-token material issued by BrickLink.

    Values are opaque and never checked here; the API rejects bad ones with a 401.
    """

    consumer_key: str
    consumer_secret: str = field(repr=False)
    token: str
    token_secret: str = field(repr=False)
