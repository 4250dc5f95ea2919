"""Type definitions for geographic framing and projection."""

from dataclasses import dataclass, field
from typing import Any, NamedTuple

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class GeoPoint:
    """A single GPS sample."""

    latitude: float  # degrees, -90..90
    longitude: float  # degrees, -180..180
    elevation: float | None = None  # meters, required for projection


@dataclass(frozen=True)
class Track:
    """One recorded activity as an ordered sequence of samples."""

    name: str
    points: tuple[GeoPoint, ...]

    def __len__(self) -> int:
        return len(self.points)

    def lat_lon(self) -> list[tuple[float, float]]:
        """Return the (latitude, longitude) pairs of all points."""
        return [(p.latitude, p.longitude) for p in self.points]


@dataclass(frozen=True)
class BoundingRectangle:
    """Axis-aligned latitude/longitude box containing all input points."""

    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float

    def __post_init__(self) -> None:
        if self.lat_min > self.lat_max or self.lon_min > self.lon_max:
            raise ValueError(f"inverted bounding rectangle: {self}")

    @property
    def is_point(self) -> bool:
        return self.lat_min == self.lat_max and self.lon_min == self.lon_max

    def to_dict(self) -> dict[str, float]:
        return {
            "lat_min": self.lat_min,
            "lat_max": self.lat_max,
            "lon_min": self.lon_min,
            "lon_max": self.lon_max,
        }


class TileCoordinate(NamedTuple):
    """Continuous position in the tile plane of one zoom level.

    Both axes range over [0, 2^zoom); (0, 0) is the north-west corner.
    """

    x: float
    y: float


@dataclass(frozen=True)
class MapTiles:
    """Integer tile rectangle at one zoom level backing the scene."""

    zoom: int
    x_tile_min: int
    x_tile_max: int
    y_tile_min: int
    y_tile_max: int
    clamped: bool = False  # True when no zoom fit the canvas and zoom 0 was forced

    @property
    def nx(self) -> int:
        """Width of the grid in tiles."""
        return self.x_tile_max - self.x_tile_min + 1

    @property
    def ny(self) -> int:
        """Height of the grid in tiles."""
        return self.y_tile_max - self.y_tile_min + 1

    def tiles(self) -> list[tuple[int, int]]:
        """All (x, y) tile indices, column by column."""
        return [
            (x, y)
            for x in range(self.x_tile_min, self.x_tile_max + 1)
            for y in range(self.y_tile_min, self.y_tile_max + 1)
        ]

    def pixel_size(self, tile_px: int) -> tuple[int, int]:
        """Footprint of the whole grid in pixels."""
        return self.nx * tile_px, self.ny * tile_px

    def to_dict(self) -> dict[str, Any]:
        return {
            "zoom": self.zoom,
            "x_tile_min": self.x_tile_min,
            "x_tile_max": self.x_tile_max,
            "y_tile_min": self.y_tile_min,
            "y_tile_max": self.y_tile_max,
            "nx": self.nx,
            "ny": self.ny,
            "clamped": self.clamped,
        }


@dataclass(frozen=True)
class SceneScale:
    """World-space sizes shared by track projection and basemap quad layout."""

    # Edge length of one rendered tile quad
    tile_size: float = 2.56

    # Track height above the plane for the lowest elevation
    base_height: float = 0.1

    # Height added between the lowest and highest elevation
    height_range: float = 2.0

    # Height of the basemap plane, below base_height to avoid z-fighting
    plane_height: float = -0.1

    def to_dict(self) -> dict[str, float]:
        return {
            "tile_size": self.tile_size,
            "base_height": self.base_height,
            "height_range": self.height_range,
            "plane_height": self.plane_height,
        }


class ScenePoint(NamedTuple):
    """A vertex in scene space; x/y horizontal, z vertical."""

    x: float
    y: float
    z: float


@dataclass
class Polyline:
    """Projected vertices of one track, shape (n, 3), float32."""

    name: str
    vertices: NDArray[np.float32] = field(default_factory=lambda: np.zeros((0, 3), dtype=np.float32))

    def __len__(self) -> int:
        return len(self.vertices)

    def points(self) -> list[ScenePoint]:
        return [ScenePoint(float(x), float(y), float(z)) for x, y, z in self.vertices]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON storage."""
        return {
            "name": self.name,
            "vertices": self.vertices.tolist(),
        }
