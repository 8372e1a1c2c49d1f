"""
Error types shared by the API, the fetch client and the seeding routine.

Author: Food Map maintainers
Date: 2026-10-19
"""

from typing import Optional


class FoodMapError(Exception):
    """Base class for food map errors."""


class ValidationError(FoodMapError):
    """Malformed or out-of-range location input.

    Attributes:
        message: Human readable description of the first failure.
        field: Dotted path of the offending field, if known.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self):
        return {"message": self.message, "field": self.field}


class NotFoundError(FoodMapError):
    """Unknown location id."""

    def __init__(self, message: str = "Location not found"):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"message": self.message}


class TransientFetchError(FoodMapError):
    """Network or parse failure while talking to the locations API.

    Surfaced to the user as a dismissible message; never retried.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
