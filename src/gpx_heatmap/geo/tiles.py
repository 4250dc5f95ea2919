"""Zoom selection under a maximum canvas size."""

import logging
import math
from dataclasses import replace

from gpx_heatmap.geo.mercator import project
from gpx_heatmap.geo.types import BoundingRectangle, MapTiles

logger = logging.getLogger(__name__)


def _tile_index(value: float, zoom: int) -> int:
    """Floor a continuous tile coordinate and keep it on the grid."""
    return min(max(math.floor(value), 0), 2**zoom - 1)


def tiles_at_zoom(bounds: BoundingRectangle, zoom: int) -> MapTiles:
    """Tile rectangle enclosing the bounding rectangle at a fixed zoom.

    Mercator y grows southward, so lat_min gives the largest row index
    and lat_max the smallest.
    """
    south_west = project(bounds.lat_min, bounds.lon_min, zoom)
    north_east = project(bounds.lat_max, bounds.lon_max, zoom)
    return MapTiles(
        zoom=zoom,
        x_tile_min=_tile_index(south_west.x, zoom),
        x_tile_max=_tile_index(north_east.x, zoom),
        y_tile_min=_tile_index(north_east.y, zoom),
        y_tile_max=_tile_index(south_west.y, zoom),
    )


def fits_canvas(tiles: MapTiles, max_canvas: tuple[int, int], tile_px: int) -> bool:
    """Whether the grid's pixel footprint fits within (width, height)."""
    width, height = tiles.pixel_size(tile_px)
    return width <= max_canvas[0] and height <= max_canvas[1]


def select_map_tiles(
    bounds: BoundingRectangle,
    max_canvas: tuple[int, int],
    tile_px: int,
    max_zoom: int,
) -> MapTiles:
    """Pick the finest zoom whose tile grid fits the canvas.

    Searches max_zoom down to 0 and returns the first grid that fits. When
    even zoom 0 is too large the zoom 0 grid is returned with clamped=True.

    Args:
        bounds: Geographic extent to cover
        max_canvas: Maximum (width, height) in pixels
        tile_px: Edge length of one tile in pixels
        max_zoom: Finest zoom level to consider

    Returns:
        MapTiles describing the selected grid
    """
    if max_zoom < 0:
        raise ValueError(f"max_zoom must be >= 0, got {max_zoom}")
    if tile_px <= 0:
        raise ValueError(f"tile_px must be positive, got {tile_px}")

    candidates = (tiles_at_zoom(bounds, zoom) for zoom in range(max_zoom, -1, -1))
    selected = next((t for t in candidates if fits_canvas(t, max_canvas, tile_px)), None)

    if selected is None:
        floor = tiles_at_zoom(bounds, 0)
        logger.warning(
            "No zoom fits a %dx%d canvas with %dpx tiles, clamping to zoom 0 (%dx%d tiles)",
            max_canvas[0], max_canvas[1], tile_px, floor.nx, floor.ny,
        )
        return replace(floor, clamped=True)

    logger.info(
        "Selected zoom %d: %dx%d tiles (x %d..%d, y %d..%d)",
        selected.zoom, selected.nx, selected.ny,
        selected.x_tile_min, selected.x_tile_max,
        selected.y_tile_min, selected.y_tile_max,
    )
    return selected
