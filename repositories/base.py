"""
Base repository for the document-store data access layer.
This follows the Repository pattern to separate request handling from data access.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from pymongo.collection import Collection

from adapters.mongo_adapter import MongoAdapter

Document = Dict[str, Any]


class BaseRepository(ABC):
    """
    Base repository bound to one collection of the shared MongoAdapter.
    Every collection access goes through the adapter's readiness check.
    """

    def __init__(self, adapter: MongoAdapter):
        self.adapter = adapter

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """MongoDB collection name."""

    @property
    def collection(self) -> Collection:
        """Collection handle; raises DatabaseUnavailableError when not connected."""
        self.adapter.ensure_ready()
        return self.adapter.collection(self.collection_name)

    def count(self) -> int:
        return self.collection.count_documents({})
