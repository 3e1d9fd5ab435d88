"""
URL set assembly: homepage first, then menu URLs, then article URLs
"""

from datetime import datetime
from typing import Iterable, List, Set

from xmlsitemap.schemas.sitemap import ChangeFrequency, SitemapEntry

HOMEPAGE_CHANGEFREQ = ChangeFrequency.DAILY
HOMEPAGE_PRIORITY = 1.0


def homepage_entry(base_url: str, now: datetime) -> SitemapEntry:
    return SitemapEntry(
        loc=base_url.rstrip("/") + "/",
        lastmod=now,
        changefreq=HOMEPAGE_CHANGEFREQ,
        priority=HOMEPAGE_PRIORITY,
    )


def remove_duplicates(entries: Iterable[SitemapEntry]) -> List[SitemapEntry]:
    """
    Keep the first entry per location, ignoring one trailing slash.
    Relative order is preserved.
    """
    seen: Set[str] = set()
    unique: List[SitemapEntry] = []

    for entry in entries:
        key = entry.normalized_loc
        if key not in seen:
            seen.add(key)
            unique.append(entry)

    return unique


def assemble(
    homepage: SitemapEntry,
    menu_entries: Iterable[SitemapEntry] = (),
    content_entries: Iterable[SitemapEntry] = (),
) -> List[SitemapEntry]:
    urls = [homepage]
    urls.extend(menu_entries)
    urls.extend(content_entries)
    return remove_duplicates(urls)
