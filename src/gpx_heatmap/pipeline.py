"""Heatmap pipeline - from GPX files to a scene file."""

import logging
import os
import time

import httpx

from gpx_heatmap.config import Settings, settings as default_settings
from gpx_heatmap.errors import EmptyInputError
from gpx_heatmap.geo import project_tracks, select_map_tiles, track_bounds
from gpx_heatmap.geo.projection import elevation_range
from gpx_heatmap.scene import Scene, layout_tile_quads, write_scene
from gpx_heatmap.tile_cache import TileCache
from gpx_heatmap.tracks import load_tracks

logger = logging.getLogger(__name__)


class HeatmapBuilder:
    """Runs all stages of the heatmap build."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or default_settings
        self.tile_cache = TileCache(
            tiles_dir=self.settings.tiles_dir,
            server_url=self.settings.tile_server_url,
            user_agent=self.settings.tile_user_agent,
            max_concurrent=self.settings.fetch_concurrency,
            timeout=self.settings.fetch_timeout_seconds,
        )

    def _texture_path(self, zoom: int, x: int, y: int) -> str:
        """Tile file path relative to the scene file."""
        tile = self.tile_cache.tile_path(zoom, x, y)
        return os.path.relpath(tile, self.settings.scene_file.parent).replace(os.sep, "/")

    async def build(self, client: httpx.AsyncClient | None = None) -> Scene:
        """Load tracks, fetch tiles and write the scene.

        Raises:
            EmptyInputError: if the GPX directory holds no usable tracks
            TrackDataError: if a track violates the projection contract
        """
        cfg = self.settings
        t_start = time.perf_counter()

        tracks = load_tracks(cfg.gpx_dir)
        if not tracks:
            raise EmptyInputError(f"no GPX tracks found in {cfg.gpx_dir}")

        bounds = track_bounds(tracks)
        logger.info(
            "Bounds: lat %.5f..%.5f, lon %.5f..%.5f",
            bounds.lat_min, bounds.lat_max, bounds.lon_min, bounds.lon_max,
        )

        grid = select_map_tiles(
            bounds,
            max_canvas=cfg.max_canvas,
            tile_px=cfg.tile_size_px,
            max_zoom=cfg.max_zoom,
        )

        # Validate tracks before any network traffic
        z_range = elevation_range(tracks)

        t_tiles = time.perf_counter()
        report = await self.tile_cache.ensure_tiles(grid, client=client)
        logger.info(
            "Tiles: %d cached, %d fetched, %d failed (%.1fs)",
            report.cached, report.fetched, len(report.failed),
            time.perf_counter() - t_tiles,
        )

        scale = cfg.scene_scale()
        polylines = project_tracks(grid, tracks, scale, z_range=z_range)
        quads = layout_tile_quads(grid, scale, self._texture_path)

        scene = Scene(
            grid=grid,
            bounds=bounds,
            scale=scale,
            elevation_range=z_range,
            quads=quads,
            polylines=polylines,
        )
        write_scene(scene, cfg.scene_file)

        logger.info(
            "Heatmap build complete in %.1fs (%d tracks, zoom %d, elevation %.0f..%.0fm)",
            time.perf_counter() - t_start, len(tracks), grid.zoom, z_range[0], z_range[1],
        )
        return scene
