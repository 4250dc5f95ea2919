"""Render GPS tracks as ribbons above a tiled web-map basemap."""

from gpx_heatmap.errors import EmptyInputError, MissingElevationError, TrackDataError
from gpx_heatmap.geo import (
    BoundingRectangle,
    GeoPoint,
    MapTiles,
    Polyline,
    ScenePoint,
    SceneScale,
    Track,
    compute_bounds,
    project,
    project_tracks,
    select_map_tiles,
)

__version__ = "0.1.0"
__all__ = [
    "BoundingRectangle",
    "EmptyInputError",
    "GeoPoint",
    "MapTiles",
    "MissingElevationError",
    "Polyline",
    "ScenePoint",
    "SceneScale",
    "Track",
    "TrackDataError",
    "compute_bounds",
    "project",
    "project_tracks",
    "select_map_tiles",
]
