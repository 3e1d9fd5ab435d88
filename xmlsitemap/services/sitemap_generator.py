"""
Sitemap generator: one full, synchronous pass from menu and content records
to the final URL set.

    provider -> NavigationTree -> category index
             -> menu entries + article entries -> dedupe -> XML
"""

import logging
from contextlib import AbstractContextManager
from datetime import datetime, timezone
from typing import Callable, List, Optional

from xmlsitemap.schemas.sitemap import SitemapEntry, SitemapOptions
from xmlsitemap.services.assembler import assemble, homepage_entry
from xmlsitemap.services.category_index import build_category_index
from xmlsitemap.services.content_urls import build_content_entries
from xmlsitemap.services.data_provider import SitemapDataProvider
from xmlsitemap.services.menu_urls import build_menu_entries
from xmlsitemap.services.navigation_tree import NavigationTree
from xmlsitemap.services.serializer import render_sitemap

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[], AbstractContextManager]


class SitemapGenerator:
    """Builds the sitemap for one request; holds no state between runs"""

    def __init__(
        self,
        provider: SitemapDataProvider,
        base_url: str,
        options: Optional[SitemapOptions] = None,
        now: Optional[datetime] = None,
    ):
        self.provider = provider
        self.base_url = base_url.rstrip("/")
        self.options = options or SitemapOptions()
        self.now = now or datetime.now(timezone.utc)

    def build_entries(self) -> List[SitemapEntry]:
        """
        Fetch records and resolve the deduplicated URL set.

        Provider errors propagate; no partial sitemap is produced.
        """
        tree = NavigationTree(self.provider.fetch_navigation_nodes())
        category_index = build_category_index(tree, self.options.category_layouts)

        menu_entries: List[SitemapEntry] = []
        if self.options.include_menu:
            menu_entries = build_menu_entries(tree, self.options, self.base_url, self.now)

        content_entries: List[SitemapEntry] = []
        if self.options.include_articles:
            items = self.provider.fetch_content_items()
            content_entries = build_content_entries(items, tree, category_index, self.base_url)

        entries = assemble(homepage_entry(self.base_url, self.now), menu_entries, content_entries)
        logger.info(
            f"Sitemap built: {len(entries)} URLs "
            f"({len(menu_entries)} menu, {len(content_entries)} articles before dedupe)"
        )
        return entries

    def generate(self) -> str:
        """Rendered sitemap document"""
        return render_sitemap(self.build_entries())


def generate_entries(
    provider_factory: ProviderFactory,
    base_url: str,
    options: Optional[SitemapOptions] = None,
) -> List[SitemapEntry]:
    """Open a provider, build the URL set and release the provider again"""
    with provider_factory() as provider:
        return SitemapGenerator(provider, base_url, options).build_entries()
