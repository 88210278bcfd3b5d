"""Tests for WebMercatorViewport."""

import pytest

from bike_traffic_map.adapters.map import WebMercatorViewport
from bike_traffic_map.domain.models import ScreenPoint


def _viewport(**overrides: float) -> WebMercatorViewport:
    params: dict = {
        "center_longitude": -71.09415,
        "center_latitude": 42.36027,
        "zoom": 12,
        "width": 800,
        "height": 600,
        "min_zoom": 5,
        "max_zoom": 18,
    }
    params.update(overrides)
    return WebMercatorViewport(**params)


def test_center_projects_to_middle_of_canvas() -> None:
    """Given a viewport, when projecting its center, then the canvas middle is returned."""
    viewport = _viewport()

    point = viewport.project(-71.09415, 42.36027)

    assert point.x == pytest.approx(400)
    assert point.y == pytest.approx(300)


def test_east_is_right_and_north_is_up() -> None:
    """Given points east and north of center, when projecting, then x grows and y shrinks."""
    viewport = _viewport()

    east = viewport.project(-71.0, 42.36027)
    north = viewport.project(-71.09415, 42.4)

    assert east.x > 400
    assert north.y < 300


def test_longitude_scale_at_zoom_zero() -> None:
    """Given zoom 0, when projecting 90 degrees east of center, then x moves a quarter world."""
    viewport = WebMercatorViewport(0, 0, 0, 512, 512)

    assert viewport.project(90, 0) == ScreenPoint(x=pytest.approx(384), y=pytest.approx(256))


def test_zooming_in_doubles_offsets() -> None:
    """Given a point off center, when zooming in one level, then its offset doubles."""
    viewport = _viewport()
    before = viewport.project(-71.0, 42.36027)

    viewport.zoom_to(13)
    after = viewport.project(-71.0, 42.36027)

    assert after.x - 400 == pytest.approx(2 * (before.x - 400))


def test_zoom_is_clamped() -> None:
    """Given zoom outside limits, when applied, then it is clamped."""
    viewport = _viewport()

    viewport.zoom_to(40)
    assert viewport.zoom == 18
    viewport.zoom_to(1)
    assert viewport.zoom == 5


def test_extreme_latitudes_are_clamped() -> None:
    """Given a polar latitude, when projecting, then a finite point is returned."""
    point = _viewport().project(0, 90)

    assert point.y == _viewport().project(0, 85.051129).y


def test_changes_notify_subscribers_once() -> None:
    """Given a subscriber, when panning, resizing and setting a view, then it is notified each time."""
    viewport = _viewport()
    calls: list[str] = []
    viewport.subscribe(lambda: calls.append("changed"))

    viewport.pan_to(-71.0, 42.3)
    viewport.resize(1024, 768)
    changed = viewport.set_view(zoom=14, width=900)

    assert changed is True
    assert calls == ["changed"] * 3
    assert viewport.center == (-71.0, 42.3)
    assert viewport.size == (900, 768)


def test_unchanged_view_does_not_notify() -> None:
    """Given the current view, when set again, then subscribers are not notified."""
    viewport = _viewport()
    calls: list[str] = []
    viewport.subscribe(lambda: calls.append("changed"))

    changed = viewport.set_view(longitude=-71.09415, latitude=42.36027, zoom=12)

    assert changed is False
    assert calls == []


def test_unsubscribe_stops_notifications() -> None:
    """Given a removed subscriber, when the view changes, then it is not called."""
    viewport = _viewport()
    calls: list[str] = []

    def listener() -> None:
        calls.append("changed")

    viewport.subscribe(listener)
    viewport.unsubscribe(listener)
    viewport.zoom_to(13)

    assert calls == []
