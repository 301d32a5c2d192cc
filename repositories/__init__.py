"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.user_repository import UserRepository
from repositories.meal_kit_repository import MealKitRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "MealKitRepository",
]
