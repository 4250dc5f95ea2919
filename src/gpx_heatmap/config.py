"""Heatmap configuration."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from gpx_heatmap.geo.types import SceneScale


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Input and output locations
    gpx_dir: Path = Path("gpx")
    tiles_dir: Path = Path("assets/tiles")
    scene_file: Path = Path("assets/scene.json")

    # Tile server
    tile_server_url: str = "https://maps.wikimedia.org/osm-intl"
    tile_user_agent: str = "Mozilla/5.0"
    fetch_concurrency: int = Field(default=8, gt=0)
    fetch_timeout_seconds: float = Field(default=30.0, gt=0)

    # Tile grid selection
    tile_size_px: int = Field(default=256, gt=0)
    max_zoom: int = Field(default=19, ge=0, le=22)
    max_canvas_width: int = Field(default=2160, gt=0)
    max_canvas_height: int = Field(default=3840, gt=0)

    # Scene sizes
    scene_tile_size: float = Field(default=2.56, gt=0)
    track_base_height: float = 0.1
    track_height_range: float = Field(default=2.0, ge=0)
    tile_plane_height: float = -0.1

    # Logging
    log_level: str = "info"

    @property
    def max_canvas(self) -> tuple[int, int]:
        return self.max_canvas_width, self.max_canvas_height

    def scene_scale(self) -> SceneScale:
        """Scene sizes shared by the projector and the basemap layout."""
        return SceneScale(
            tile_size=self.scene_tile_size,
            base_height=self.track_base_height,
            height_range=self.track_height_range,
            plane_height=self.tile_plane_height,
        )


settings = Settings()
