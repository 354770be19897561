"""XML serialization of sitemap descriptors."""
import xml.sax.saxutils as saxutils
from typing import List
from urllib.parse import urljoin

from pagemeta.exceptions import ValidationError
from pagemeta.services.sitemap.models import SitemapEntry, SitemapMap

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
IMAGE_NAMESPACE = "http://www.google.com/schemas/sitemap-image/1.1"

CHANGE_FREQUENCIES = {"always", "hourly", "daily", "weekly", "monthly", "yearly", "never"}


def escape_xml(text: str) -> str:
    """Escape XML special characters."""
    return saxutils.escape(text)


def absolute_url(hostname: str, url: str) -> str:
    """Resolve an entry url against the site hostname."""
    return urljoin(hostname.rstrip("/") + "/", url)


def validate_entry(entry: SitemapEntry) -> None:
    """Check an entry before it is written.

    Raises:
        ValidationError: If the url is not a string, the priority is outside
            0..1, or the change frequency is unknown
    """
    if not isinstance(entry.url, str):
        raise ValidationError(f"Sitemap url must be a string, got {type(entry.url).__name__}")
    if entry.priority is not None:
        if isinstance(entry.priority, bool) or not isinstance(entry.priority, (int, float)):
            raise ValidationError(f"Sitemap priority must be a number, got {entry.priority!r}")
        if not 0 <= entry.priority <= 1:
            raise ValidationError(f"Sitemap priority must be between 0 and 1, got {entry.priority}")
    if entry.changefreq is not None and entry.changefreq not in CHANGE_FREQUENCIES:
        raise ValidationError(f"Unknown sitemap changefreq: {entry.changefreq!r}")


def serialize(sitemap_map: SitemapMap) -> str:
    """Generate XML sitemap from the descriptor's URL list."""
    urls: List[SitemapEntry] = sitemap_map.urls
    for entry in urls:
        validate_entry(entry)

    xml_content = ['<?xml version="1.0" encoding="UTF-8"?>']

    # Add namespaces
    if any(entry.images for entry in urls):
        xml_content.append(f'<urlset xmlns="{SITEMAP_NAMESPACE}" xmlns:image="{IMAGE_NAMESPACE}">')
    else:
        xml_content.append(f'<urlset xmlns="{SITEMAP_NAMESPACE}">')

    for entry in urls:
        xml_content.append('  <url>')
        xml_content.append(f'    <loc>{escape_xml(absolute_url(sitemap_map.hostname, entry.url))}</loc>')

        if entry.lastmod:
            xml_content.append(f'    <lastmod>{escape_xml(entry.lastmod)}</lastmod>')
        if entry.changefreq:
            xml_content.append(f'    <changefreq>{entry.changefreq}</changefreq>')
        if entry.priority is not None:
            xml_content.append(f'    <priority>{float(entry.priority):.1f}</priority>')

        for image_url in entry.images or []:
            xml_content.append('    <image:image>')
            xml_content.append(f'      <image:loc>{escape_xml(absolute_url(sitemap_map.hostname, image_url))}</image:loc>')
            xml_content.append('    </image:image>')

        xml_content.append('  </url>')

    xml_content.append('</urlset>')
    return '\n'.join(xml_content)
