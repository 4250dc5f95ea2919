"""Projection of tracks into tile-grid-relative scene space."""

import logging
from collections.abc import Sequence

import numpy as np

from gpx_heatmap.errors import EmptyInputError, MissingElevationError
from gpx_heatmap.geo.mercator import project_array
from gpx_heatmap.geo.types import MapTiles, Polyline, SceneScale, Track

logger = logging.getLogger(__name__)


def elevation_range(tracks: Sequence[Track]) -> tuple[float, float]:
    """Global (min, max) elevation across all tracks in a single pass.

    Also validates the input: every track must have points and every point
    an elevation.

    Raises:
        EmptyInputError: no tracks, or a track without points
        MissingElevationError: a point has no elevation
    """
    if not tracks:
        raise EmptyInputError("no tracks to project")

    z_min = float("inf")
    z_max = float("-inf")
    for track_index, track in enumerate(tracks):
        if not track.points:
            raise EmptyInputError("track has no points", track_index=track_index)
        for point_index, point in enumerate(track.points):
            if point.elevation is None:
                raise MissingElevationError(track_index, point_index)
            z_min = min(z_min, point.elevation)
            z_max = max(z_max, point.elevation)

    return z_min, z_max


def project_tracks(
    grid: MapTiles,
    tracks: Sequence[Track],
    scale: SceneScale | None = None,
    z_range: tuple[float, float] | None = None,
) -> list[Polyline]:
    """Project every track onto the scene footprint of the tile grid.

    Horizontal positions are centred on the grid: a point on the grid's
    north-west corner lands at (-nx/2, -ny/2) * tile_size. Heights are
    normalized over all tracks into base_height + [0, height_range].

    Args:
        grid: Tile grid the basemap is built from
        tracks: Tracks with elevation on every point
        scale: Scene sizes, shared with the basemap quad layout
        z_range: Result of elevation_range(tracks) when the caller already
            validated the tracks; computed here otherwise

    Returns:
        One Polyline per track, same order and point count as the input
    """
    scale = scale or SceneScale()
    z_min, z_max = z_range if z_range is not None else elevation_range(tracks)
    dz = z_max - z_min
    if dz == 0:
        logger.info("All points share elevation %.1fm, using flat height", z_min)

    nx = float(grid.nx)
    ny = float(grid.ny)

    polylines: list[Polyline] = []
    for track in tracks:
        lats = np.fromiter((p.latitude for p in track.points), dtype=np.float64, count=len(track))
        lons = np.fromiter((p.longitude for p in track.points), dtype=np.float64, count=len(track))
        elevations = np.fromiter(
            (p.elevation for p in track.points), dtype=np.float64, count=len(track)
        )

        tile_x, tile_y = project_array(lats, lons, grid.zoom)

        frac_x = (tile_x - grid.x_tile_min) / nx
        frac_y = (tile_y - grid.y_tile_min) / ny

        x = (-0.5 + frac_x) * nx * scale.tile_size
        y = (-0.5 + frac_y) * ny * scale.tile_size
        if dz == 0:
            z = np.full_like(elevations, scale.base_height)
        else:
            z = scale.base_height + (elevations - z_min) / dz * scale.height_range

        vertices = np.column_stack((x, y, z)).astype(np.float32)
        polylines.append(Polyline(name=track.name, vertices=vertices))

    logger.debug(
        "Projected %d tracks (%d points) at zoom %d",
        len(polylines), sum(len(p) for p in polylines), grid.zoom,
    )
    return polylines
