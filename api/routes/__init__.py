"""API routes package"""

from . import health, users, meal_kits

__all__ = ["health", "users", "meal_kits"]
