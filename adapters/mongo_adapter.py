"""MongoDB adapter for the users and meal kits collections.
"""

from typing import Any, Callable, Dict, Optional
import logging

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from app.config import Settings
from app.exceptions import DatabaseUnavailableError

logger = logging.getLogger("chefkit.mongo")


class MongoAdapter:
    """
    Owns the MongoClient and the collection handles built from it.

    One instance is created at startup and shared by every request. Collection
    handles are resolved lazily on first use and cached for the lifetime of the
    adapter; they hold no data.
    """

    def __init__(
        self,
        settings: Settings,
        client: Optional[MongoClient] = None,
        on_first_connect: Optional[Callable[["MongoAdapter"], None]] = None,
    ):
        self.settings = settings
        self._client = client
        self._collections: Dict[str, Collection] = {}
        self._ready = False
        self._closed = False
        # runs once, after the first successful ping (startup or later)
        self._on_first_connect = on_first_connect
        self._connected_once = False

    # ------------------ Connection ------------------
    def _build_client(self) -> MongoClient:
        s = self.settings
        return MongoClient(
            s.database_uri(),
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
            maxIdleTimeMS=s.mongo_max_idle_time_ms,
            serverSelectionTimeoutMS=s.mongo_server_selection_timeout_ms,
            socketTimeoutMS=s.mongo_socket_timeout_ms,
        )

    @property
    def client(self) -> MongoClient:
        if self._closed:
            raise DatabaseUnavailableError("Database connection closed")
        if self._client is None:
            self._client = self._build_client()
        return self._client

    @property
    def is_ready(self) -> bool:
        return self._ready

    def connect(self) -> bool:
        """Ping the cluster and mark the adapter ready.

        Returns:
            True when the server answered, False otherwise (the failure is logged).
            A closed adapter never reconnects.
        """
        if self._closed:
            logger.warning("MongoDB adapter is closed; not reconnecting")
            return False
        try:
            self.client.admin.command("ping")
            self._ready = True
            logger.info(
                "Connected to MongoDB %s (database: %s)",
                self.settings.mongo_host if not self.settings.mongo_uri else "custom URI",
                self.settings.mongo_db_name,
            )
        except PyMongoError as exc:
            self._ready = False
            logger.warning("Could not reach MongoDB: %s", exc)

        if self._ready and not self._connected_once:
            self._connected_once = True
            if self._on_first_connect is not None:
                self._on_first_connect(self)
        return self._ready

    def ensure_ready(self) -> None:
        """Raise DatabaseUnavailableError unless a connection has been established."""
        if self._ready:
            return
        if not self.connect():
            raise DatabaseUnavailableError()

    def close(self):
        """Close MongoDB connection. The adapter cannot be used afterwards."""
        try:
            if self._client is not None:
                self._client.close()
                logger.info("MongoDB client closed")
        except PyMongoError:
            logger.exception("Error closing MongoDB client")
        finally:
            self._client = None
            self._collections = {}
            self._ready = False
            self._closed = True

    # ------------------ Collections ------------------
    def collection(self, name: str) -> Collection:
        """Return the cached handle for ``name``, resolving it on first use."""
        handle = self._collections.get(name)
        if handle is None:
            handle = self.client[self.settings.mongo_db_name][name]
            self._collections[name] = handle
        return handle

    @property
    def users(self) -> Collection:
        return self.collection(self.settings.users_collection)

    @property
    def meal_kits(self) -> Collection:
        return self.collection(self.settings.meal_kits_collection)

    def status(self) -> Dict[str, Any]:
        return {
            "database": "connected" if self._ready else "unavailable",
            "database_name": self.settings.mongo_db_name,
        }
