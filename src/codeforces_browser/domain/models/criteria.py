"""Value objects for the user's rating filter and sort choice."""

from dataclasses import dataclass
from enum import Enum


class SortOrder(str, Enum):
    """Sort direction for the filtered problem list."""

    ASCENDING = "a"
    DESCENDING = "d"

    @classmethod
    def from_token(cls, token: str) -> "SortOrder":
        # Only "d" selects descending; anything else sorts ascending.
        return cls.DESCENDING if token == cls.DESCENDING.value else cls.ASCENDING


@dataclass(frozen=True)
class SearchCriteria:
    """Rating range (inclusive on both ends) and sort order."""

    min_rating: int
    max_rating: int
    order: SortOrder = SortOrder.ASCENDING
