"""Data models for the sitemap feed."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List, Optional, Union


@dataclass
class SitemapEntry:
    """Represents a single URL in a sitemap.

    ``url`` is relative to the site hostname unless it is already absolute.
    """
    url: str
    priority: Optional[Union[int, float]] = None
    changefreq: Optional[str] = None
    lastmod: Optional[str] = None
    images: Optional[List[str]] = None


@dataclass
class SitemapMap:
    """In-progress sitemap descriptor handed to ``sitemap`` hooks.

    Hooks may append to or edit ``urls``, change ``hostname`` or
    ``cache_time``, or swap ``serializer`` for their own document builder.
    """
    hostname: str
    cache_time: int
    urls: List[SitemapEntry] = field(default_factory=list)
    serializer: Optional[Callable[["SitemapMap"], str]] = None


@dataclass(frozen=True)
class SitemapDocument:
    """A generated sitemap. Never modified after creation."""
    xml: str
    generated_at: datetime
    url_count: int
    cache_time: int

    @property
    def max_age(self) -> int:
        """Cache lifetime in whole seconds."""
        return self.cache_time // 1000

    def __str__(self) -> str:
        return self.xml


class DocumentCell:
    """Holds the current sitemap document.

    There is a single writer (the generator); readers always see either the
    previous or the new document since replacement is one reference swap.
    """

    def __init__(self, document: Optional[SitemapDocument] = None):
        self._document = document

    def get(self) -> Optional[SitemapDocument]:
        return self._document

    def swap(self, document: SitemapDocument) -> Optional[SitemapDocument]:
        """Install ``document`` and return the one it replaced."""
        previous, self._document = self._document, document
        return previous
