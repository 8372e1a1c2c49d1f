"""
Map view-state controller.

Turns the selected location id into camera motion and a delayed popup,
independently of whether the selection came from the list, a marker or
code. The map widget is reached only through two injected effects, a
camera and a popup opener, so the controller runs without a real map.

States:
- IDLE: nothing selected.
- TRANSITIONING: camera flying towards the selection, popup timer armed.
- SETTLED: flight finished, popup open.

Author: Food Map maintainers
Date: 2026-10-19
"""

import logging
from enum import Enum
from typing import Any, Iterable, Optional, Protocol

from .config import FOCUS_ZOOM, FLY_DURATION
from .timers import Scheduler, TimerHandle

logger = logging.getLogger(__name__)


class Camera(Protocol):
    def fly_to(self, latitude: float, longitude: float, zoom: float, duration: float) -> None: ...

    def stop(self) -> None: ...


class PopupOpener(Protocol):
    def open_popup(self, location_id: int) -> None: ...


class ViewState(str, Enum):
    IDLE = "idle"
    TRANSITIONING = "transitioning"
    SETTLED = "settled"


def _get(location: Any, name: str):
    if isinstance(location, dict):
        return location.get(name)
    return getattr(location, name, None)


def find_location(location_id: int, visible: Iterable[Any]) -> Optional[Any]:
    """Return the visible location with ``location_id``, or None."""
    return next((loc for loc in visible if _get(loc, "id") == location_id), None)


class MapViewController:
    """Selection, camera and popup sequencing for one map session.

    Attributes:
        focus_zoom: Zoom level used when flying to a selection.
        fly_duration: Camera animation length in seconds; the popup opens
            once it has elapsed.
    """

    def __init__(
            self,
            camera: Camera,
            popups: PopupOpener,
            scheduler: Scheduler,
            focus_zoom: float = FOCUS_ZOOM,
            fly_duration: float = FLY_DURATION,
    ):
        self.camera = camera
        self.popups = popups
        self.scheduler = scheduler
        self.focus_zoom = focus_zoom
        self.fly_duration = fly_duration
        self._state = ViewState.IDLE
        self._selected_id: Optional[int] = None
        self._popup_timer: Optional[TimerHandle] = None

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def selected_id(self) -> Optional[int]:
        return self._selected_id

    @property
    def has_pending_popup(self) -> bool:
        return self._popup_timer is not None

    def select(self, location_id: Optional[int], visible: Iterable[Any]) -> None:
        """Select a location from the currently visible set.

        Args:
            location_id: Id to select, or None to clear.
            visible: Locations currently shown (filtered set).
        """
        if location_id is None:
            self.clear()
            return

        # A superseded selection must never open its popup
        self._cancel_popup()
        self._selected_id = location_id

        target = find_location(location_id, visible)
        if target is None:
            logger.debug("Selection %s not visible, no camera move", location_id)
            self._state = ViewState.IDLE
            return

        self.camera.stop()
        self._state = ViewState.TRANSITIONING
        self.camera.fly_to(
            _get(target, "latitude"), _get(target, "longitude"), self.focus_zoom, self.fly_duration
        )
        self._popup_timer = self.scheduler.call_later(
            self.fly_duration, lambda: self._settle(location_id)
        )

    def clear(self) -> None:
        """Drop the selection; the camera stays where it is."""
        self._cancel_popup()
        self._selected_id = None
        self._state = ViewState.IDLE

    def dispose(self) -> None:
        self._cancel_popup()

    def _settle(self, location_id: int) -> None:
        self._popup_timer = None
        if location_id != self._selected_id:
            return
        self._state = ViewState.SETTLED
        self.popups.open_popup(location_id)

    def _cancel_popup(self) -> None:
        if self._popup_timer is not None:
            self._popup_timer.cancel()
            self._popup_timer = None
