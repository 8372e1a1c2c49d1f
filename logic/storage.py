"""
Location storage adapter.

Thin wrapper around the SQLAlchemy session exposing the three operations the
API needs: list all, get by id, insert.

Author: Food Map maintainers
Date: 2026-10-19
"""

import logging
from typing import List, Optional, Union, Dict, Any

from sqlalchemy.orm import Session

from database import Location
from .validation import LocationCreate

logger = logging.getLogger(__name__)


class LocationStore:
    """Persistence for locations.

    Attributes:
        db: Open SQLAlchemy session, owned by the caller.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_locations(self) -> List[Location]:
        """Return every location in insertion order."""
        return self.db.query(Location).order_by(Location.id).all()

    def get_location(self, location_id: int) -> Optional[Location]:
        """Return the location with ``location_id`` or None."""
        return self.db.get(Location, location_id)

    def count(self) -> int:
        return self.db.query(Location).count()

    def create_location(self, data: Union[LocationCreate, Dict[str, Any]]) -> Location:
        """Insert a validated location and commit.

        Args:
            data: Parsed create payload.

        Returns:
            The stored row, with its assigned id.
        """
        location = self._build(data)
        self.db.add(location)
        self.db.commit()
        self.db.refresh(location)
        logger.info("Created location %s (%s)", location.id, location.name)
        return location

    def bulk_create(self, items: List[LocationCreate]) -> List[Location]:
        """Insert several locations in one transaction."""
        rows = [self._build(item) for item in items]
        self.db.add_all(rows)
        self.db.commit()
        for row in rows:
            self.db.refresh(row)
        return rows

    @staticmethod
    def _build(data: Union[LocationCreate, Dict[str, Any]]) -> Location:
        if isinstance(data, dict):
            data = LocationCreate.model_validate(data)
        return Location(**data.model_dump())
