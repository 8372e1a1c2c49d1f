"""
Startup seeding of the locations table.

When the table is empty the bundled fixture is loaded. Any failure is logged
and replaced by a single landmark record; seeding never stops the app.

Author: Food Map maintainers
Date: 2026-10-19
"""

import json
import logging
from typing import List

from sqlalchemy.orm import Session

from .config import SEED_PATH
from .storage import LocationStore
from .validation import LocationCreate, parse_location_create

logger = logging.getLogger(__name__)

FALLBACK_LOCATION = {
    "name": "內湖科技園區服務大樓",
    "description": "地圖中心點範例",
    "latitude": 25.0771545,
    "longitude": 121.5733916,
    "category": "landmark",
}


def load_fixture(path: str = None) -> List[LocationCreate]:
    """Read and validate the seed fixture.

    Args:
        path: JSON file holding a list of location objects.

    Returns:
        Parsed locations in file order.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If it is not valid JSON or not a list.
        ValidationError: If any record is invalid.
    """
    with open(path or SEED_PATH, "r", encoding="utf-8") as f:
        records = json.load(f)
    if not isinstance(records, list):
        raise ValueError("Seed fixture must be a JSON list")
    return [parse_location_create(record) for record in records]


def seed_database(db: Session, fixture_path: str = None) -> int:
    """Seed an empty locations table.

    Args:
        db: Open session.
        fixture_path: Optional fixture override.

    Returns:
        Number of rows inserted.
    """
    store = LocationStore(db)
    try:
        if store.count() > 0:
            logger.info("Locations table already populated, skipping seed")
            return 0
        rows = store.bulk_create(load_fixture(fixture_path))
        logger.info("Seeded %d locations", len(rows))
        return len(rows)
    except Exception:
        logger.exception("Seeding failed, inserting fallback landmark")
        db.rollback()

    try:
        store.create_location(FALLBACK_LOCATION)
        return 1
    except Exception:
        logger.exception("Fallback seed failed")
        db.rollback()
        return 0
