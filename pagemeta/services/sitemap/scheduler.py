"""Periodic sitemap regeneration."""
import asyncio
import logging
from typing import Optional

from pagemeta.exceptions import GenerationError
from pagemeta.services.sitemap.generator import SitemapGenerator

logger = logging.getLogger(__name__)


class SitemapScheduler:
    """Runs the generator once on start and then every ``interval`` seconds."""

    def __init__(self, generator: SitemapGenerator, interval: float):
        if interval <= 0:
            raise ValueError(f"Sitemap interval must be positive, got {interval}")
        self.generator = generator
        self.interval = interval
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start the background loop on the running event loop."""
        if self.running:
            return
        logger.info(f"Starting sitemap scheduler (every {self.interval}s)")
        self._task = asyncio.get_running_loop().create_task(self._run())

    async def stop(self) -> None:
        """Cancel the background loop and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Stopped sitemap scheduler")

    async def tick(self) -> None:
        """Run one generation, logging failures instead of raising them."""
        try:
            await self.generator.generate()
        except GenerationError as e:
            logger.error(f"Error generating sitemap: {e}")
        except Exception as e:
            logger.error(f"Sitemap listener failed: {e}")

    async def _run(self) -> None:
        while True:
            await self.tick()
            await asyncio.sleep(self.interval)
