"""
Tests for the map view-state controller.

Run with: python -m pytest tests/test_view_state.py -v
"""

import pytest

from logic.view_state import MapViewController, ViewState


class FakeCamera:
    def __init__(self):
        self.flights = []
        self.stops = 0

    def fly_to(self, latitude, longitude, zoom, duration):
        self.flights.append((latitude, longitude, zoom, duration))

    def stop(self):
        self.stops += 1


class FakePopups:
    def __init__(self):
        self.opened = []

    def open_popup(self, location_id):
        self.opened.append(location_id)


VISIBLE = [
    {"id": 1, "name": "Journey Kaffe", "latitude": 25.0805, "longitude": 121.5725, "category": "coffee"},
    {"id": 2, "name": "Kintai", "latitude": 25.079, "longitude": 121.576, "category": "restaurant"},
    {"id": 3, "name": "50 Lan", "latitude": 25.0788, "longitude": 121.5719, "category": "bubble_tea"},
]


@pytest.fixture
def camera():
    return FakeCamera()


@pytest.fixture
def popups():
    return FakePopups()


@pytest.fixture
def controller(camera, popups, scheduler):
    return MapViewController(camera, popups, scheduler, focus_zoom=18, fly_duration=1.5)


class TestSelection:

    def test_starts_idle(self, controller):
        assert controller.state is ViewState.IDLE
        assert controller.selected_id is None
        assert not controller.has_pending_popup

    def test_select_flies_then_settles(self, controller, camera, popups, scheduler):
        controller.select(1, VISIBLE)

        assert controller.state is ViewState.TRANSITIONING
        assert camera.flights == [(25.0805, 121.5725, 18, 1.5)]
        assert popups.opened == []

        scheduler.advance(1.4)
        assert popups.opened == []

        scheduler.advance(0.2)
        assert popups.opened == [1]
        assert controller.state is ViewState.SETTLED
        assert not controller.has_pending_popup

    def test_reselection_race(self, controller, camera, popups, scheduler):
        controller.select(1, VISIBLE)
        scheduler.advance(0.3)

        controller.select(2, VISIBLE)
        assert controller.state is ViewState.TRANSITIONING
        assert camera.flights[-1] == (25.079, 121.576, 18, 1.5)
        assert camera.stops >= 1

        scheduler.advance(1.3)
        # id 1 would have settled at t=1.5
        assert popups.opened == []

        scheduler.advance(0.3)
        assert popups.opened == [2]
        scheduler.advance(5)
        assert popups.opened == [2]

    def test_rapid_reselection_opens_one_popup(self, controller, popups, scheduler):
        for location_id in [1, 2, 3, 2, 1, 3]:
            controller.select(location_id, VISIBLE)
            scheduler.advance(0.1)
        assert scheduler.pending == 1

        scheduler.advance(2)
        assert popups.opened == [3]

    def test_reselect_after_settle(self, controller, camera, popups, scheduler):
        controller.select(1, VISIBLE)
        scheduler.advance(2)
        controller.select(3, VISIBLE)
        assert controller.state is ViewState.TRANSITIONING
        scheduler.advance(2)
        assert popups.opened == [1, 3]
        assert len(camera.flights) == 2


class TestClear:

    def test_clear_after_settle(self, controller, camera, popups, scheduler):
        controller.select(1, VISIBLE)
        scheduler.advance(1.6)
        assert popups.opened == [1]

        controller.clear()
        assert controller.state is ViewState.IDLE
        assert not controller.has_pending_popup
        assert scheduler.pending == 0

        scheduler.advance(5)
        assert popups.opened == [1]
        assert len(camera.flights) == 1

    def test_clear_mid_flight_cancels_popup(self, controller, popups, scheduler):
        controller.select(2, VISIBLE)
        scheduler.advance(0.5)
        controller.select(None, VISIBLE)

        scheduler.advance(5)
        assert popups.opened == []
        assert controller.selected_id is None

    def test_clear_when_idle(self, controller):
        controller.clear()
        assert controller.state is ViewState.IDLE

    def test_dispose_cancels_timer(self, controller, popups, scheduler):
        controller.select(1, VISIBLE)
        controller.dispose()
        scheduler.advance(5)
        assert popups.opened == []


class TestUnknownId:

    def test_unknown_id_is_noop(self, controller, camera, popups, scheduler):
        controller.select(99, VISIBLE)

        assert camera.flights == []
        assert camera.stops == 0
        assert controller.state is ViewState.IDLE
        scheduler.advance(5)
        assert popups.opened == []

    def test_filtered_out_selection_supersedes_pending_popup(self, controller, camera, popups, scheduler):
        controller.select(1, VISIBLE)
        scheduler.advance(0.3)
        controller.select(2, [VISIBLE[0]])

        assert controller.selected_id == 2
        assert controller.state is ViewState.IDLE
        assert not controller.has_pending_popup
        assert len(camera.flights) == 1

        scheduler.advance(5)
        assert popups.opened == []

    def test_filtered_out_selection_after_settle(self, controller, camera, popups, scheduler):
        controller.select(1, VISIBLE)
        scheduler.advance(2)
        controller.select(3, [VISIBLE[0]])

        assert controller.state is ViewState.IDLE
        scheduler.advance(5)
        assert popups.opened == [1]
        assert len(camera.flights) == 1
