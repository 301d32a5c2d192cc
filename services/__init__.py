"""Services package - Business logic layer"""

from services.user_service import UserService
from services import meal_kit_service

__all__ = [
    "UserService",
    "meal_kit_service",
]
