"""
Location API routes.

This module contains the list, get and create endpoints for food spots.
Locations are never updated or deleted.

Author: Food Map maintainers
Date: 2026-10-19
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from database import get_db
from logic.errors import NotFoundError, ValidationError
from logic.filtering import ALL_GROUPS, UnknownGroupError, filter_locations
from logic.storage import LocationStore
from logic.validation import parse_location_create

router = APIRouter()


@router.get("/api/locations")
def list_locations(q: str = "", group: str = ALL_GROUPS, db: Session = Depends(get_db)):
    """List locations in insertion order.

    Args:
        q: Optional free-text filter on name or category.
        group: Optional category group, "all" by default.
        db: Database session.

    Returns:
        List of location dictionaries.

    Raises:
        ValidationError: If ``group`` is unknown.
    """
    locations = LocationStore(db).list_locations()
    try:
        locations = filter_locations(locations, q, group)
    except UnknownGroupError as e:
        raise ValidationError(str(e), "group") from e
    return [location.to_dict() for location in locations]


@router.get("/api/locations/{location_id}")
def get_location(location_id: str, db: Session = Depends(get_db)):
    """Get a single location.

    Raises:
        NotFoundError: If no location has this id, including non-numeric ids.
    """
    try:
        location_id = int(location_id)
    except ValueError:
        raise NotFoundError() from None
    location = LocationStore(db).get_location(location_id)
    if location is None:
        raise NotFoundError()
    return location.to_dict()


@router.post("/api/locations", status_code=201)
def create_location(payload: Any = Body(...), db: Session = Depends(get_db)):
    """Create a location.

    Args:
        payload: Location fields without ``id``.
        db: Database session.

    Returns:
        The created location with its assigned id.

    Raises:
        ValidationError: On the first invalid field.
    """
    data = parse_location_create(payload)
    location = LocationStore(db).create_location(data)
    return JSONResponse(location.to_dict(), status_code=201)
