"""Sitemap generation with a single cached document."""
import asyncio
import inspect
import logging
from datetime import datetime, timezone
from typing import Optional

from pagemeta.config import Settings, get_settings
from pagemeta.exceptions import GenerationError, ValidationError
from pagemeta.hooks import HookRegistry, hooks
from pagemeta.services.sitemap.models import DocumentCell, SitemapDocument, SitemapEntry, SitemapMap
from pagemeta.services.sitemap.serializer import serialize

logger = logging.getLogger(__name__)

SITEMAP_HOOK = "sitemap"


class SitemapGenerator:
    """Builds the sitemap document and keeps the latest one cached.

    Only one generation runs at a time. A call made while another is still
    running returns ``None`` right away. A failed generation leaves the
    previous document in place.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        registry: Optional[HookRegistry] = None,
        cell: Optional[DocumentCell] = None,
    ):
        self.settings = settings or get_settings()
        self.hooks = registry if registry is not None else hooks
        self.cell = cell if cell is not None else DocumentCell()
        self._generating = False

    @property
    def document(self) -> Optional[SitemapDocument]:
        """The most recently generated document, if any."""
        return self.cell.get()

    @property
    def in_progress(self) -> bool:
        return self._generating

    def build_map(self) -> SitemapMap:
        """Create the default descriptor: the site root only."""
        return SitemapMap(
            hostname=self.settings.site_url,
            cache_time=self.settings.SITEMAP_CACHE_MS,
            urls=[
                SitemapEntry(
                    url="",
                    priority=1,
                    changefreq=self.settings.SITEMAP_CHANGEFREQ,
                ),
            ],
            serializer=serialize,
        )

    async def _build_document(self) -> SitemapDocument:
        sitemap_map = self.build_map()

        await self.hooks.run(SITEMAP_HOOK, sitemap_map)

        serializer = sitemap_map.serializer or serialize
        xml = serializer(sitemap_map)
        if inspect.isawaitable(xml):
            xml = await xml
        if not isinstance(xml, str) or not xml:
            raise ValidationError(f"Sitemap serializer must return a non-empty string, got {type(xml).__name__}")

        return SitemapDocument(
            xml=xml,
            generated_at=datetime.now(timezone.utc),
            url_count=len(sitemap_map.urls),
            cache_time=sitemap_map.cache_time,
        )

    async def generate(self) -> Optional[SitemapDocument]:
        """Regenerate and cache the sitemap.

        Returns:
            The new document, or None if a generation was already running

        Raises:
            GenerationError: If a hook or the serializer fails, or the
                generation exceeds the configured timeout
        """
        if self._generating:
            logger.warning("Sitemap generation already in progress, skipping")
            return None

        self._generating = True
        timeout = self.settings.SITEMAP_GENERATION_TIMEOUT_SECONDS
        try:
            try:
                document = await asyncio.wait_for(self._build_document(), timeout=timeout)
            except asyncio.TimeoutError as e:
                raise GenerationError(f"Sitemap generation timed out after {timeout}s") from e
            except Exception as e:
                raise GenerationError(f"Sitemap generation failed: {e}") from e

            self.cell.swap(document)
        finally:
            self._generating = False

        logger.info(f"Generated sitemap with {document.url_count} URLs")
        self.hooks.emit(SITEMAP_HOOK, document)
        return document
