#!/usr/bin/env python3
"""
Reset the MongoDB meal kits collection to the demo fixtures in data/meal_kits.json.
Every existing meal kit is deleted first; this cannot be undone.

Usage:
    python scripts/seed_meal_kits.py
    python scripts/seed_meal_kits.py --fixtures path/to/meal_kits.json
"""

import sys
import json
import logging
import argparse
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from adapters import MongoAdapter
from app.config import settings
from domain.models import MealKit
from repositories import MealKitRepository
from services.meal_kit_service import iso_timestamp

logger = logging.getLogger("chefkit.seed")

DEFAULT_FIXTURES = Path(__file__).parent.parent / "data" / "meal_kits.json"


def load_fixtures(path: Path = DEFAULT_FIXTURES) -> List[Dict[str, Any]]:
    """Read the fixture file and validate every entry as a MealKit."""
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    return [MealKit.model_validate(item).model_dump(exclude_none=True) for item in raw]


def seed_meal_kits(
    repository: MealKitRepository,
    fixtures: List[Dict[str, Any]],
    now: Optional[datetime] = None,
) -> Tuple[int, int]:
    """Replace all meal kits with ``fixtures``, each stamped with this run's createdAt.

    Returns:
        (inserted count, total meal kits after insertion)
    """
    created_at = iso_timestamp(now or datetime.now(timezone.utc))
    documents = [{**fixture, "createdAt": created_at} for fixture in fixtures]

    result = repository.replace_all(documents)
    inserted = len(result.inserted_ids)
    logger.info(f"{inserted} meal kits inserted successfully!")

    total = repository.count()
    logger.info(f"Total meal kits in database: {total}")
    return inserted, total


def run(fixtures_path: Path = DEFAULT_FIXTURES) -> bool:
    """Connect, seed, and always close the connection."""
    mongo = MongoAdapter(settings)
    try:
        fixtures = load_fixtures(fixtures_path)
        logger.info(f"Loaded {len(fixtures)} meal kits from {fixtures_path}")

        mongo.ensure_ready()
        logger.info("Connected to MongoDB!")

        seed_meal_kits(MealKitRepository(mongo), fixtures)
        return True
    except Exception as e:
        logger.exception(f"Error seeding data: {e}")
        return False
    finally:
        mongo.close()
        logger.info("Connection closed")


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    parser = argparse.ArgumentParser(
        description="Replace the meal kits collection with demo fixtures"
    )
    parser.add_argument(
        "--fixtures",
        type=Path,
        default=DEFAULT_FIXTURES,
        help="JSON file with the meal kits to insert",
    )
    args = parser.parse_args()

    sys.exit(0 if run(args.fixtures) else 1)
