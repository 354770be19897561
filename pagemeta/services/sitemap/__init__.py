"""Sitemap service: cached document generation and scheduling."""
from pagemeta.services.sitemap.models import DocumentCell, SitemapDocument, SitemapEntry, SitemapMap
from pagemeta.services.sitemap.serializer import serialize
from pagemeta.services.sitemap.generator import SITEMAP_HOOK, SitemapGenerator
from pagemeta.services.sitemap.scheduler import SitemapScheduler

__all__ = [
    "DocumentCell",
    "SitemapDocument",
    "SitemapEntry",
    "SitemapMap",
    "serialize",
    "SITEMAP_HOOK",
    "SitemapGenerator",
    "SitemapScheduler",
]
