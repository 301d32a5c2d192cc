"""
Domain enums for the ChefKit application.
"""

import enum
from typing import Optional


class MealKitSort(str, enum.Enum):
    """Accepted values of the meal kit ``sort`` query parameter"""

    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    NEWEST = "newest"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["MealKitSort"]:
        """Return the matching member, or None for absent/unknown values."""
        try:
            return cls(value)
        except ValueError:
            return None


class Difficulty(str, enum.Enum):
    """Meal kit difficulty levels used by the fixtures"""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


ALL_CUISINES = "All"
