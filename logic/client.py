"""
Client for the locations API with list caching.

Mirrors what the web UI's data hook does: the list is fetched once and
served from cache until a successful create invalidates it. Failures are
raised as TransientFetchError and never retried.

Author: Food Map maintainers
Date: 2026-10-19
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from .errors import NotFoundError, TransientFetchError, ValidationError
from .validation import LocationOut, parse_location

logger = logging.getLogger(__name__)

LOCATIONS_PATH = "/api/locations"


class LocationsClient:
    """Fetch, cache and create locations over HTTP.

    Attributes:
        base_url: Server root, e.g. ``http://localhost:8000``. Empty when the
            session already knows its base (FastAPI's TestClient).
        session: ``requests.Session`` or anything with the same get/post.
    """

    def __init__(self, base_url: str = "", session: Any = None, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self._cache: Optional[List[LocationOut]] = None

    @property
    def is_cached(self) -> bool:
        return self._cache is not None

    def invalidate(self) -> None:
        self._cache = None

    def list_locations(self) -> List[LocationOut]:
        """Return all locations, from cache when valid.

        Raises:
            TransientFetchError: On network, status or parse failure.
        """
        if self._cache is not None:
            return list(self._cache)

        response = self._request("get", LOCATIONS_PATH, "Failed to fetch locations")
        if response.status_code != 200:
            raise TransientFetchError("Failed to fetch locations", response.status_code)

        body = self._json(response, "Failed to fetch locations")
        if not isinstance(body, list):
            raise TransientFetchError("Failed to fetch locations")
        try:
            items = [parse_location(item) for item in body]
        except ValidationError as e:
            raise TransientFetchError(f"Failed to fetch locations: {e.message}") from e

        self._cache = items
        return list(items)

    def get_location(self, location_id: int) -> LocationOut:
        """Fetch one location.

        Raises:
            NotFoundError: If the server answers 404.
            TransientFetchError: On any other failure.
        """
        response = self._request("get", f"{LOCATIONS_PATH}/{location_id}", "Failed to fetch location")
        if response.status_code == 404:
            raise NotFoundError(self._json(response, "Failed to fetch location").get("message", "Location not found"))
        if response.status_code != 200:
            raise TransientFetchError("Failed to fetch location", response.status_code)
        try:
            return parse_location(self._json(response, "Failed to fetch location"))
        except ValidationError as e:
            raise TransientFetchError(f"Failed to fetch location: {e.message}") from e

    def create_location(self, data: Dict[str, Any]) -> LocationOut:
        """Create a location and invalidate the cached list.

        Raises:
            ValidationError: If the server rejects the payload (400).
            TransientFetchError: On any other failure.
        """
        response = self._request("post", LOCATIONS_PATH, "Failed to create location", json=data)
        if response.status_code == 400:
            error = self._json(response, "Failed to create location")
            raise ValidationError(error.get("message", "Invalid input"), error.get("field"))
        if response.status_code != 201:
            raise TransientFetchError("Failed to create location", response.status_code)

        try:
            created = parse_location(self._json(response, "Failed to create location"))
        except ValidationError as e:
            raise TransientFetchError(f"Failed to create location: {e.message}") from e

        self.invalidate()
        return created

    def _request(self, method: str, path: str, failure: str, **kwargs):
        url = f"{self.base_url}{path}"
        try:
            return getattr(self.session, method)(url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method.upper(), url, e)
            raise TransientFetchError(failure) from e

    @staticmethod
    def _json(response, failure: str):
        try:
            return response.json()
        except ValueError as e:
            raise TransientFetchError(failure, getattr(response, "status_code", None)) from e
