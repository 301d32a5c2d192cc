"""
API dependencies for dependency injection
"""

from fastapi import Depends, Request

from adapters import MongoAdapter
from repositories import MealKitRepository, UserRepository


def get_mongo_adapter(request: Request) -> MongoAdapter:
    """The adapter created at startup and stored on app.state."""
    return request.app.state.mongo


def get_user_repository(mongo: MongoAdapter = Depends(get_mongo_adapter)) -> UserRepository:
    """
    Users repository dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(repo: UserRepository = Depends(get_user_repository)):
            ...
    """
    return UserRepository(mongo)


def get_meal_kit_repository(mongo: MongoAdapter = Depends(get_mongo_adapter)) -> MealKitRepository:
    """Meal kits repository dependency for FastAPI routes."""
    return MealKitRepository(mongo)
