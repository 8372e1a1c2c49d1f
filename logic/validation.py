"""
Validation and sanitization utilities.

This module contains the shared request/response contract for locations and
the helpers that turn validation failures into ``{message, field}`` errors.

Author: Food Map maintainers
Date: 2026-10-19
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError

DEFAULT_CATEGORY = "general"


class LocationCreate(BaseModel):
    """Body of ``POST /api/locations``: a location without its id."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    category: Optional[str] = DEFAULT_CATEGORY
    icon: Optional[str] = None
    brand: Optional[str] = None
    address: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Name is required")
        return value

    @field_validator("category")
    @classmethod
    def default_category(cls, value: Optional[str]) -> str:
        # Empty means "general" at rest
        return value or DEFAULT_CATEGORY

    @field_validator("tags", mode="before")
    @classmethod
    def tags_or_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class LocationOut(LocationCreate):
    """A stored location as returned by the API."""

    id: int


def first_error(exc: PydanticValidationError) -> ValidationError:
    """Convert a pydantic error into the API's first-failure error.

    Args:
        exc: Error raised while parsing a payload.

    Returns:
        ValidationError naming the first offending field.
    """
    errors = exc.errors()
    if not errors:
        return ValidationError("Invalid input")
    err = errors[0]
    field = ".".join(str(part) for part in err.get("loc", ()))
    return ValidationError(err.get("msg", "Invalid input"), field or None)


def parse_location_create(payload: Any) -> LocationCreate:
    """Validate a create payload.

    Args:
        payload: Decoded JSON body.

    Returns:
        The parsed LocationCreate.

    Raises:
        ValidationError: If the payload is not an object or any field fails.
    """
    if not isinstance(payload, dict):
        raise ValidationError("Expected a JSON object")
    try:
        return LocationCreate.model_validate(payload)
    except PydanticValidationError as e:
        raise first_error(e) from e


def parse_location(payload: Dict[str, Any]) -> LocationOut:
    """Validate a location received from the API.

    Raises:
        ValidationError: If the item does not match the contract.
    """
    try:
        return LocationOut.model_validate(payload)
    except PydanticValidationError as e:
        raise first_error(e) from e
