"""
Adapters package - External service connections.
"""

from adapters.mongo_adapter import MongoAdapter

__all__ = [
    "MongoAdapter",
]
