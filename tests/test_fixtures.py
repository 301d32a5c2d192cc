"""
Shared helpers for tests: a MongoAdapter over a mocked client and sample documents.
"""

import copy
from unittest.mock import MagicMock

from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from adapters import MongoAdapter
from app.config import settings


def make_mongo(ready: bool = True) -> MongoAdapter:
    """
    Build a MongoAdapter whose client is a MagicMock.

    ``client[db][name]`` returns one MagicMock per collection name so the
    users and meal kits collections can be configured independently.
    """
    client = MagicMock(name="MongoClient")
    collections = {
        settings.users_collection: MagicMock(name="users"),
        settings.meal_kits_collection: MagicMock(name="mealKits"),
    }
    client.__getitem__.return_value.__getitem__.side_effect = collections.__getitem__

    if ready:
        client.admin.command.return_value = {"ok": 1.0}
    else:
        client.admin.command.side_effect = ServerSelectionTimeoutError("No servers found")

    adapter = MongoAdapter(settings, client=client)
    adapter.connect()
    return adapter


def inserted(object_id=None) -> InsertOneResult:
    return InsertOneResult(object_id or ObjectId(), True)


def updated(matched: int, modified: int) -> UpdateResult:
    return UpdateResult({"n": matched, "nModified": modified, "ok": 1.0}, True)


def deleted(count: int) -> DeleteResult:
    return DeleteResult({"n": count, "ok": 1.0}, True)


SAMPLE_MEAL_KITS = [
    {
        "_id": ObjectId("65f1a2b3c4d5e6f708192a01"),
        "id": "1",
        "title": "Italian Pasta Carbonara",
        "price": 28.99,
        "cuisine": "Italian",
        "chef": "Chef Marco Rossi",
        "userEmail": "demo@chefkit.com",
        "createdAt": "2025-01-10T09:00:00.000Z",
    },
    {
        "_id": ObjectId("65f1a2b3c4d5e6f708192a02"),
        "id": "2",
        "title": "Thai Green Curry Bowl",
        "price": 32.99,
        "cuisine": "Thai",
        "chef": "Chef Somying Lee",
        "userEmail": "demo@chefkit.com",
        "createdAt": "2025-01-11T09:00:00.000Z",
    },
]


def sample_meal_kits():
    return copy.deepcopy(SAMPLE_MEAL_KITS)


def make_user(email: str = "ana@example.com", **extra):
    return {"_id": ObjectId(), "email": email, "name": "Ana", **extra}
