"""Tests for heatmap settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from gpx_heatmap.config import Settings
from gpx_heatmap.geo.types import SceneScale


def test_settings_defaults():
    """Defaults match the standard slippy-map setup."""
    settings = Settings()
    assert settings.tile_size_px == 256
    assert settings.max_zoom == 19
    assert settings.max_canvas == (2160, 3840)
    assert settings.tile_server_url.startswith("https://")
    assert settings.fetch_concurrency > 0


def test_scene_scale_from_settings():
    assert Settings().scene_scale() == SceneScale()

    custom = Settings(scene_tile_size=1.0, track_base_height=0.2, track_height_range=3.0, tile_plane_height=-0.5)
    assert custom.scene_scale() == SceneScale(tile_size=1.0, base_height=0.2, height_range=3.0, plane_height=-0.5)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MAX_ZOOM", "12")
    monkeypatch.setenv("GPX_DIR", "/data/tracks")
    monkeypatch.setenv("TILE_SERVER_URL", "https://tile.openstreetmap.org")

    settings = Settings()
    assert settings.max_zoom == 12
    assert settings.gpx_dir == Path("/data/tracks")
    assert settings.tile_server_url == "https://tile.openstreetmap.org"


@pytest.mark.parametrize(
    "field,value",
    [("max_zoom", -1), ("max_zoom", 30), ("tile_size_px", 0), ("max_canvas_width", -5), ("fetch_concurrency", 0)],
)
def test_invalid_values_rejected(field, value):
    with pytest.raises(ValidationError):
        Settings(**{field: value})
