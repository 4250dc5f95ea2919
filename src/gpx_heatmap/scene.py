"""Scene description handed to the 3D viewer."""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from gpx_heatmap.geo.types import BoundingRectangle, MapTiles, Polyline, ScenePoint, SceneScale

logger = logging.getLogger(__name__)


@dataclass
class TileQuad:
    """One textured basemap quad."""

    zoom: int
    x: int
    y: int
    center: ScenePoint
    size: float
    texture: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "zoom": self.zoom,
            "x": self.x,
            "y": self.y,
            "center": list(self.center),
            "size": self.size,
            "texture": self.texture,
        }


def _default_texture_path(zoom: int, x: int, y: int) -> str:
    return f"tiles/tile_{zoom}_{x}_{y}.png"


def layout_tile_quads(
    grid: MapTiles,
    scale: SceneScale,
    texture_path: Callable[[int, int, int], Path | str] | None = None,
) -> list[TileQuad]:
    """Place one quad per grid tile on the footprint used by project_tracks.

    Column i and row j of the grid are centred at
    ((-nx/2 + 0.5 + i) * tile_size, (-ny/2 + 0.5 + j) * tile_size).
    """
    texture_path = texture_path or _default_texture_path

    quads = []
    for i, x in enumerate(range(grid.x_tile_min, grid.x_tile_max + 1)):
        for j, y in enumerate(range(grid.y_tile_min, grid.y_tile_max + 1)):
            center = ScenePoint(
                (-0.5 * grid.nx + 0.5 + i) * scale.tile_size,
                (-0.5 * grid.ny + 0.5 + j) * scale.tile_size,
                scale.plane_height,
            )
            quads.append(
                TileQuad(
                    zoom=grid.zoom,
                    x=x,
                    y=y,
                    center=center,
                    size=scale.tile_size,
                    texture=str(texture_path(grid.zoom, x, y)),
                )
            )
    return quads


@dataclass
class Scene:
    """Everything the viewer needs: basemap quads and track polylines."""

    grid: MapTiles
    bounds: BoundingRectangle
    scale: SceneScale
    elevation_range: tuple[float, float]
    quads: list[TileQuad] = field(default_factory=list)
    polylines: list[Polyline] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON storage."""
        return {
            "grid": self.grid.to_dict(),
            "bounds": self.bounds.to_dict(),
            "scale": self.scale.to_dict(),
            "elevation_range": list(self.elevation_range),
            "axes": {"horizontal": ["x", "y"], "vertical": "z"},
            "tiles": [q.to_dict() for q in self.quads],
            "polylines": [p.to_dict() for p in self.polylines],
        }


def write_scene(scene: Scene, path: Path) -> Path:
    """Write the scene as JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(scene.to_dict()), encoding="utf-8")
    logger.info(
        "Wrote scene with %d tiles and %d polylines to %s",
        len(scene.quads), len(scene.polylines), path,
    )
    return path
