"""Spherical web-mercator conversion between degrees and tile coordinates."""

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from gpx_heatmap.geo.types import TileCoordinate

# Latitude at which the mercator square ends; beyond it y leaves [0, 2^zoom).
MAX_LATITUDE = 85.0511287798


def project(lat_deg: float, lon_deg: float, zoom: int) -> TileCoordinate:
    """Map a geographic position to continuous tile coordinates.

    Args:
        lat_deg: Latitude in degrees, within +/- MAX_LATITUDE
        lon_deg: Longitude in degrees
        zoom: Zoom level (>= 0)

    Returns:
        TileCoordinate whose integer parts are the slippy-map tile indices
    """
    n = 2.0**zoom
    lat_rad = math.radians(lat_deg)
    x = (lon_deg + 180.0) / 360.0 * n
    y = (1.0 - math.asinh(math.tan(lat_rad)) / math.pi) / 2.0 * n
    return TileCoordinate(x, y)


def project_array(
    lats: ArrayLike, lons: ArrayLike, zoom: int
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Vectorized form of project() over arrays of degrees."""
    n = 2.0**zoom
    lat_rad = np.radians(np.asarray(lats, dtype=np.float64))
    x = (np.asarray(lons, dtype=np.float64) + 180.0) / 360.0 * n
    y = (1.0 - np.arcsinh(np.tan(lat_rad)) / np.pi) / 2.0 * n
    return x, y


def unproject(x: float, y: float, zoom: int) -> tuple[float, float]:
    """Inverse of project(): tile coordinates back to (lat, lon) degrees."""
    n = 2.0**zoom
    lon_deg = x / n * 360.0 - 180.0
    lat_deg = math.degrees(math.atan(math.sinh(math.pi * (1.0 - 2.0 * y / n))))
    return lat_deg, lon_deg
