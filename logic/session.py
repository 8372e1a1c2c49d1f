"""
One map session: fetched locations, search/group filter and selection.

Wires the pieces the sidebar and the map share. The visible list is always
recomputed from the last fetched set; a failed fetch leaves both the list
and the filter untouched and records a user-facing message instead.

Author: Food Map maintainers
Date: 2026-10-19
"""

import logging
from typing import Any, Dict, List, Optional

from .client import LocationsClient
from .config import load_config
from .errors import FoodMapError, TransientFetchError
from .filtering import ALL_GROUPS, categories_for, filter_locations
from .search_input import SearchInput
from .timers import Scheduler
from .view_state import Camera, MapViewController, PopupOpener

logger = logging.getLogger(__name__)


class FoodMapSession:
    """State behind one open map page.

    Attributes:
        locations: Last successfully fetched locations.
        query: Query currently applied to the list.
        group: Group filter currently applied.
        error: Message shown when the list failed to load.
        notice: Dismissible message from the last failed create.
    """

    def __init__(
            self,
            client: LocationsClient,
            camera: Camera,
            popups: PopupOpener,
            scheduler: Scheduler,
            settings: Optional[Dict[str, Any]] = None,
    ):
        settings = settings or load_config()
        self.client = client
        self.locations: List[Any] = []
        self.query = ""
        self.group = ALL_GROUPS
        self.error: Optional[str] = None
        self.notice: Optional[str] = None
        self.search = SearchInput(
            self.set_query,
            scheduler,
            debounce=settings["search_debounce"],
            compose_debounce=settings["compose_debounce"],
        )
        self.controller = MapViewController(
            camera,
            popups,
            scheduler,
            focus_zoom=settings["focus_zoom"],
            fly_duration=settings["fly_duration"],
        )

    @property
    def visible(self) -> List[Any]:
        return filter_locations(self.locations, self.query, self.group)

    def refresh(self) -> bool:
        """Reload the list through the client.

        Returns:
            True if the list was loaded.
        """
        try:
            self.locations = self.client.list_locations()
        except TransientFetchError as e:
            logger.warning("Location list unavailable: %s", e.message)
            self.error = e.message
            return False
        self.error = None
        return True

    def set_query(self, query: str) -> None:
        self.query = query

    def set_group(self, group: str) -> None:
        categories_for(group)  # raises UnknownGroupError
        self.group = group

    def select(self, location_id: Optional[int]) -> None:
        self.controller.select(location_id, self.visible)

    def clear_selection(self) -> None:
        self.controller.clear()

    def create_location(self, data: Dict[str, Any]) -> Optional[Any]:
        """Create a spot; on failure keep a notice rather than raising.

        Returns:
            The created location, or None if it failed.
        """
        try:
            created = self.client.create_location(data)
        except FoodMapError as e:
            self.notice = getattr(e, "message", str(e))
            return None
        self.notice = None
        self.refresh()
        return created

    def dismiss_notice(self) -> None:
        self.notice = None

    def dispose(self) -> None:
        self.search.dispose()
        self.controller.dispose()
