"""Bounding rectangle of all track samples."""

from collections.abc import Iterable, Sequence

from gpx_heatmap.errors import EmptyInputError
from gpx_heatmap.geo.types import BoundingRectangle, Track


def compute_bounds(points: Iterable[tuple[float, float]]) -> BoundingRectangle:
    """Reduce (lat, lon) pairs to their bounding rectangle.

    Raises:
        EmptyInputError: if there are no points
    """
    lat_min = lon_min = float("inf")
    lat_max = lon_max = float("-inf")
    seen = False
    for lat, lon in points:
        seen = True
        lat_min = min(lat_min, lat)
        lat_max = max(lat_max, lat)
        lon_min = min(lon_min, lon)
        lon_max = max(lon_max, lon)

    if not seen:
        raise EmptyInputError("cannot bound an empty set of points")

    return BoundingRectangle(lat_min=lat_min, lat_max=lat_max, lon_min=lon_min, lon_max=lon_max)


def track_bounds(tracks: Sequence[Track]) -> BoundingRectangle:
    """Bounding rectangle over every point of every track."""
    return compute_bounds((p.latitude, p.longitude) for track in tracks for p in track.points)
