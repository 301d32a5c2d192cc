"""
Meal Kit Repository - Data access layer for the meal kits collection
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from pymongo.errors import PyMongoError
from pymongo.results import DeleteResult, InsertManyResult, InsertOneResult, UpdateResult

from repositories.base import BaseRepository, Document

logger = logging.getLogger("chefkit.repositories.meal_kits")


class MealKitRepository(BaseRepository):
    """
    Repository for meal kit documents.

    Meal kits are addressed by their application-level ``id`` string,
    not by the MongoDB ``_id``.
    """

    @property
    def collection_name(self) -> str:
        return self.adapter.settings.meal_kits_collection

    def ensure_indexes(self) -> None:
        try:
            self.collection.create_index("id", name="id_lookup")
            self.collection.create_index("userEmail", name="owner_lookup")
        except PyMongoError as exc:
            logger.warning("Could not create meal kit indexes: %s", exc)

    def find(
        self,
        query: Optional[Dict[str, Any]] = None,
        sort: Optional[Sequence[Tuple[str, int]]] = None,
    ) -> List[Document]:
        """Find meal kits matching ``query``.

        Args:
            query: MongoDB filter document (empty matches everything)
            sort: pymongo sort keys; None keeps the server's natural order

        Returns:
            List of meal kit documents
        """
        cursor = self.collection.find(query or {})
        if sort:
            cursor = cursor.sort(list(sort))
        return list(cursor)

    def find_by_id(self, meal_kit_id: str) -> Optional[Document]:
        return self.collection.find_one({"id": meal_kit_id})

    def find_by_owner(self, email: str) -> List[Document]:
        return list(self.collection.find({"userEmail": email}))

    def insert(self, meal_kit: Document) -> InsertOneResult:
        return self.collection.insert_one(dict(meal_kit))

    def update_fields(self, meal_kit_id: str, fields: Document) -> UpdateResult:
        """Merge ``fields`` into the matching document with $set."""
        return self.collection.update_one({"id": meal_kit_id}, {"$set": fields})

    def delete_by_id(self, meal_kit_id: str) -> DeleteResult:
        return self.collection.delete_one({"id": meal_kit_id})

    def replace_all(self, meal_kits: List[Document]) -> InsertManyResult:
        """Delete every meal kit, then bulk insert ``meal_kits``."""
        collection = self.collection
        deleted = collection.delete_many({})
        logger.info("Cleared %d existing meal kits", deleted.deleted_count)
        return collection.insert_many([dict(m) for m in meal_kits])
