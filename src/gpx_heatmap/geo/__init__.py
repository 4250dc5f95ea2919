"""Geographic framing and projection of GPS tracks."""

from gpx_heatmap.geo.bounds import compute_bounds, track_bounds
from gpx_heatmap.geo.mercator import MAX_LATITUDE, project, project_array, unproject
from gpx_heatmap.geo.projection import elevation_range, project_tracks
from gpx_heatmap.geo.tiles import fits_canvas, select_map_tiles, tiles_at_zoom
from gpx_heatmap.geo.types import (
    BoundingRectangle,
    GeoPoint,
    MapTiles,
    Polyline,
    ScenePoint,
    SceneScale,
    TileCoordinate,
    Track,
)

__all__ = [
    "BoundingRectangle",
    "GeoPoint",
    "MAX_LATITUDE",
    "MapTiles",
    "Polyline",
    "ScenePoint",
    "SceneScale",
    "TileCoordinate",
    "Track",
    "compute_bounds",
    "elevation_range",
    "fits_canvas",
    "project",
    "project_array",
    "project_tracks",
    "select_map_tiles",
    "tiles_at_zoom",
    "track_bounds",
    "unproject",
]
