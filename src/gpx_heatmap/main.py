"""Command line entry point."""

import asyncio
import logging
import sys

from gpx_heatmap.config import settings
from gpx_heatmap.errors import TrackDataError
from gpx_heatmap.pipeline import HeatmapBuilder


def setup_logging() -> None:
    """Configure logging for the heatmap build."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )


async def main() -> int:
    """Build the heatmap scene. Returns the process exit code."""
    setup_logging()
    logger = logging.getLogger(__name__)
    logger.info("gpx-heatmap starting...")

    builder = HeatmapBuilder(settings)
    try:
        await builder.build()
    except (TrackDataError, FileNotFoundError) as e:
        logger.error("Heatmap build failed: %s", e)
        return 1
    return 0


def run() -> None:
    """Entry point for the gpx-heatmap command."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
