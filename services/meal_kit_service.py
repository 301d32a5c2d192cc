from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple
import logging
import re

from pymongo import ASCENDING, DESCENDING

from domain.enums import ALL_CUISINES, MealKitSort

logger = logging.getLogger("chefkit.meal_kits")

SEARCH_FIELDS = ("title", "chef", "cuisine")

_SORT_KEYS = {
    MealKitSort.PRICE_ASC: [("price", ASCENDING)],
    MealKitSort.PRICE_DESC: [("price", DESCENDING)],
    MealKitSort.NEWEST: [("createdAt", DESCENDING)],
}


def build_filter(cuisine: Optional[str] = None, search: Optional[str] = None) -> Dict[str, Any]:
    """
    Meal kit filter document.
    - cuisine: exact match; "All" or empty means no filter
    - search: case-insensitive substring of title, chef or cuisine
    """
    query: Dict[str, Any] = {}

    if cuisine and cuisine != ALL_CUISINES:
        query["cuisine"] = cuisine

    if search:
        pattern = re.escape(search)
        query["$or"] = [
            {field: {"$regex": pattern, "$options": "i"}} for field in SEARCH_FIELDS
        ]

    return query


def sort_keys(sort: Optional[str]) -> Optional[List[Tuple[str, int]]]:
    """pymongo sort keys for ``sort``; None when it is absent or unknown."""
    key = MealKitSort.parse(sort)
    if key is None:
        if sort:
            logger.debug(f"Ignoring unknown sort value {sort!r}")
        return None
    return list(_SORT_KEYS[key])


def iso_timestamp(now: datetime) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def epoch_millis(now: datetime) -> int:
    return int(now.timestamp() * 1000)


def stamp_new_meal_kit(body: Dict[str, Any], now: Optional[datetime] = None) -> Dict[str, Any]:
    """Copy ``body`` and stamp the server-assigned ``id`` and ``createdAt``.

    Client-supplied values for either field are overwritten.
    """
    now = now or datetime.now(timezone.utc)
    meal_kit = dict(body)
    meal_kit["id"] = str(epoch_millis(now))
    meal_kit["createdAt"] = iso_timestamp(now)
    return meal_kit
