"""Pytest configuration and fixtures for heatmap tests."""

import io
from pathlib import Path

import pytest
from PIL import Image

from gpx_heatmap.geo.types import GeoPoint, Track


def _make_track(name: str, samples: list[tuple[float, float, float | None]]) -> Track:
    """Build a Track from (lat, lon, elevation) tuples."""
    return Track(
        name=name,
        points=tuple(GeoPoint(latitude=lat, longitude=lon, elevation=ele) for lat, lon, ele in samples),
    )


def _gpx_document(name: str | None, segments: list[list[tuple[float, float, float | None]]]) -> str:
    """Render a minimal GPX 1.1 document with one track."""
    parts = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<gpx version="1.1" creator="tests" xmlns="http://www.topografix.com/GPX/1/1">',
        "<trk>",
    ]
    if name:
        parts.append(f"<name>{name}</name>")
    for segment in segments:
        parts.append("<trkseg>")
        for lat, lon, ele in segment:
            ele_tag = f"<ele>{ele}</ele>" if ele is not None else ""
            parts.append(f'<trkpt lat="{lat}" lon="{lon}">{ele_tag}</trkpt>')
        parts.append("</trkseg>")
    parts.extend(["</trk>", "</gpx>"])
    return "\n".join(parts)


@pytest.fixture
def make_track():
    """Factory for Tracks built from (lat, lon, elevation) tuples."""
    return _make_track


@pytest.fixture
def gpx_document():
    """Factory for GPX document text."""
    return _gpx_document


@pytest.fixture
def alpine_tracks() -> list[Track]:
    """Two tracks around 47.0N 8.0E with elevations 400-450m."""
    ridge = _make_track(
        "ridge",
        [
            (47.000, 8.000, 400.0),
            (47.003, 8.006, 415.0),
            (47.006, 8.012, 430.0),
            (47.010, 8.020, 450.0),
        ],
    )
    valley = _make_track(
        "valley",
        [
            (47.004, 8.010, 420.0),
            (47.005, 8.011, 425.0),
            (47.006, 8.012, 428.0),
        ],
    )
    return [ridge, valley]


@pytest.fixture
def gpx_dir(tmp_path: Path) -> Path:
    """Directory with two GPX files of the alpine tracks."""
    directory = tmp_path / "gpx"
    directory.mkdir()
    (directory / "a_ridge.gpx").write_text(
        _gpx_document(
            "Ridge",
            [[(47.000, 8.000, 400.0), (47.003, 8.006, 415.0)], [(47.010, 8.020, 450.0)]],
        ),
        encoding="utf-8",
    )
    (directory / "b_valley.gpx").write_text(
        _gpx_document(None, [[(47.004, 8.010, 420.0), (47.005, 8.011, 425.0)]]),
        encoding="utf-8",
    )
    return directory


@pytest.fixture
def png_bytes() -> bytes:
    """A solid red 256px PNG tile."""
    buf = io.BytesIO()
    Image.new("RGB", (256, 256), (255, 0, 0)).save(buf, format="PNG")
    return buf.getvalue()
