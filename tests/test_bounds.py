"""Tests for bounding rectangle computation."""

import pytest

from gpx_heatmap.errors import EmptyInputError, TrackDataError
from gpx_heatmap.geo.bounds import compute_bounds, track_bounds
from gpx_heatmap.geo.types import BoundingRectangle


def test_single_point_is_degenerate():
    """One point gives a zero-area rectangle at that point."""
    bounds = compute_bounds([(47.1, 8.3)])
    assert bounds.lat_min == bounds.lat_max == 47.1
    assert bounds.lon_min == bounds.lon_max == 8.3
    assert bounds.is_point


def test_min_max_per_axis():
    bounds = compute_bounds([(47.0, 8.02), (47.01, 8.0), (46.99, 8.01)])
    assert bounds == BoundingRectangle(lat_min=46.99, lat_max=47.01, lon_min=8.0, lon_max=8.02)


def test_order_independent():
    points = [(10.0, -3.0), (-5.0, 7.0), (2.5, 0.0), (8.0, -9.0)]
    assert compute_bounds(points) == compute_bounds(list(reversed(points)))


def test_accepts_generator():
    bounds = compute_bounds((lat, lat * 2) for lat in range(1, 4))
    assert bounds.lat_max == 3
    assert bounds.lon_max == 6


def test_empty_input_raises():
    """No points means no bounding rectangle."""
    with pytest.raises(EmptyInputError):
        compute_bounds([])


def test_empty_input_is_value_error():
    with pytest.raises(ValueError):
        compute_bounds(iter(()))
    assert issubclass(EmptyInputError, TrackDataError)


def test_track_bounds_flattens_all_tracks(alpine_tracks):
    bounds = track_bounds(alpine_tracks)
    assert bounds.lat_min == 47.0
    assert bounds.lat_max == 47.01
    assert bounds.lon_min == 8.0
    assert bounds.lon_max == 8.02


def test_track_bounds_without_tracks_raises():
    with pytest.raises(EmptyInputError):
        track_bounds([])


def test_inverted_rectangle_rejected():
    with pytest.raises(ValueError):
        BoundingRectangle(lat_min=1.0, lat_max=0.0, lon_min=0.0, lon_max=1.0)
