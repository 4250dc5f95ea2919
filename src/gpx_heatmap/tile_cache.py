"""On-disk cache of basemap tiles fetched from a slippy-map server."""

import asyncio
import io
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import httpx
from PIL import Image, ImageOps

from gpx_heatmap.geo.types import MapTiles

logger = logging.getLogger(__name__)


@dataclass
class FetchReport:
    """Outcome of making sure all tiles of a grid are on disk."""

    requested: int = 0
    cached: int = 0
    fetched: int = 0
    failed: list[tuple[int, int]] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.failed


def transform_tile(data: bytes) -> Image.Image:
    """Decode a tile and apply the basemap look (grayscale, inverted)."""
    with Image.open(io.BytesIO(data)) as image:
        return ImageOps.invert(image.convert("L"))


class TileCache:
    """Keeps tile_{zoom}_{x}_{y}.png files for a tile grid."""

    def __init__(
        self,
        tiles_dir: Path,
        server_url: str,
        user_agent: str = "Mozilla/5.0",
        max_concurrent: int = 8,
        timeout: float = 30.0,
    ) -> None:
        self.tiles_dir = tiles_dir
        self.server_url = server_url.rstrip("/")
        self.user_agent = user_agent
        self.max_concurrent = max_concurrent
        self.timeout = timeout

    def tile_path(self, zoom: int, x: int, y: int) -> Path:
        return self.tiles_dir / f"tile_{zoom}_{x}_{y}.png"

    def tile_url(self, zoom: int, x: int, y: int) -> str:
        return f"{self.server_url}/{zoom}/{x}/{y}.png"

    def missing_tiles(self, grid: MapTiles) -> list[tuple[int, int]]:
        """Grid cells without a file in the cache."""
        return [(x, y) for x, y in grid.tiles() if not self.tile_path(grid.zoom, x, y).exists()]

    async def ensure_tiles(
        self, grid: MapTiles, client: httpx.AsyncClient | None = None
    ) -> FetchReport:
        """Fetch every missing tile of the grid concurrently.

        A failed tile is logged and listed in the report; the other
        downloads carry on. A client passed in is left open.
        """
        self.tiles_dir.mkdir(parents=True, exist_ok=True)
        missing = self.missing_tiles(grid)
        report = FetchReport(requested=grid.nx * grid.ny)
        report.cached = report.requested - len(missing)

        if not missing:
            logger.info("All %d tiles cached in %s", report.requested, self.tiles_dir)
            return report

        logger.info(
            "Fetching %d of %d tiles at zoom %d from %s",
            len(missing), report.requested, grid.zoom, self.server_url,
        )

        owns_client = client is None
        if client is None:
            client = httpx.AsyncClient(
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
                follow_redirects=True,
            )

        semaphore = asyncio.Semaphore(self.max_concurrent)
        try:
            results = await asyncio.gather(
                *(self._fetch_tile(client, semaphore, grid.zoom, x, y) for x, y in missing),
                return_exceptions=True,
            )
        finally:
            if owns_client:
                await client.aclose()

        for (x, y), result in zip(missing, results):
            if isinstance(result, Exception):
                logger.warning(
                    "Failed to fetch tile %s: %r", self.tile_url(grid.zoom, x, y), result
                )
                report.failed.append((x, y))
            elif isinstance(result, BaseException):
                raise result
            elif result:
                report.fetched += 1
            else:
                report.failed.append((x, y))

        if report.failed:
            logger.warning("%d tiles could not be fetched", len(report.failed))
        return report

    async def _fetch_tile(
        self,
        client: httpx.AsyncClient,
        semaphore: asyncio.Semaphore,
        zoom: int,
        x: int,
        y: int,
    ) -> bool:
        """Download, transform and store a single tile."""
        url = self.tile_url(zoom, x, y)
        path = self.tile_path(zoom, x, y)
        async with semaphore:
            try:
                response = await client.get(url, headers={"User-Agent": self.user_agent})
                response.raise_for_status()
                await asyncio.to_thread(self._store_tile, response.content, path)
            except (httpx.HTTPError, OSError) as e:
                logger.warning("Failed to fetch tile %s: %s", url, e)
                return False

        logger.debug("Downloaded %s to %s", url, path)
        return True

    @staticmethod
    def _store_tile(data: bytes, path: Path) -> None:
        """Write the transformed tile so that only complete files reach path."""
        partial = path.with_name(path.name + ".part")
        try:
            transform_tile(data).save(partial, format="PNG")
            os.replace(partial, path)
        finally:
            partial.unlink(missing_ok=True)
