"""Loading GPS tracks from GPX files."""

import logging
from pathlib import Path

import gpxpy
import gpxpy.gpx

from gpx_heatmap.errors import TrackDataError
from gpx_heatmap.geo.types import GeoPoint, Track

logger = logging.getLogger(__name__)


def load_track(path: Path) -> Track | None:
    """Parse one GPX file into a Track.

    All segment points of all tracks are taken in document order. Returns
    None when the file holds no track points.

    Raises:
        TrackDataError: if the file is not valid GPX
    """
    with open(path, encoding="utf-8") as f:
        try:
            gpx = gpxpy.parse(f)
        except gpxpy.gpx.GPXException as e:
            raise TrackDataError(f"cannot parse GPX file {path}: {e}") from e

    points = tuple(
        GeoPoint(latitude=p.latitude, longitude=p.longitude, elevation=p.elevation)
        for track in gpx.tracks
        for segment in track.segments
        for p in segment.points
    )
    if not points:
        logger.warning("Skipping %s: no track points", path)
        return None

    name = next((t.name for t in gpx.tracks if t.name), None) or path.stem
    return Track(name=name, points=points)


def load_tracks(directory: Path) -> list[Track]:
    """Load every .gpx file in a directory, sorted by file name."""
    if not directory.is_dir():
        raise FileNotFoundError(f"GPX directory not found: {directory}")

    paths = sorted(p for p in directory.iterdir() if p.is_file() and p.suffix.lower() == ".gpx")
    tracks = [track for track in (load_track(p) for p in paths) if track is not None]

    logger.info(
        "Loaded %d tracks (%d points) from %s",
        len(tracks), sum(len(t) for t in tracks), directory,
    )
    return tracks
