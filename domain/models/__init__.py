"""
Domain models package - Pydantic document models.
"""

from domain.models.meal_kit import MealKit

__all__ = ["MealKit"]
