"""
User Repository - Data access layer for the users collection
"""

import logging
from typing import List, Optional

from pymongo.errors import PyMongoError
from pymongo.results import InsertOneResult

from repositories.base import BaseRepository, Document

logger = logging.getLogger("chefkit.repositories.users")

EMAIL_INDEX_NAME = "email_unique"


class UserRepository(BaseRepository):
    """Repository for user documents, keyed by email."""

    @property
    def collection_name(self) -> str:
        return self.adapter.settings.users_collection

    def ensure_indexes(self) -> None:
        """Unique index on email; existing duplicates make this fail, which is logged."""
        try:
            self.collection.create_index("email", unique=True, name=EMAIL_INDEX_NAME)
        except PyMongoError as exc:
            logger.warning("Could not create unique email index: %s", exc)

    def list_all(self) -> List[Document]:
        return list(self.collection.find({}))

    def find_by_email(self, email: str) -> Optional[Document]:
        return self.collection.find_one({"email": email})

    def insert(self, user: Document) -> InsertOneResult:
        # insert_one adds _id to the dict it is given
        return self.collection.insert_one(dict(user))
