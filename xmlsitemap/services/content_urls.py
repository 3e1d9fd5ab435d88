"""
Content URL resolver.

An article is only listed when it has a "pretty" home in the menu:

1. a category listing menu item for its category -> <menu path>/<article alias>
2. a single-article menu item pointing at it      -> <menu item path>

Articles with neither are left out of the sitemap.
"""

import logging
from typing import Dict, Iterable, List, Optional

from xmlsitemap.schemas.content import ContentItem
from xmlsitemap.schemas.sitemap import ChangeFrequency, SitemapEntry
from xmlsitemap.services.navigation_tree import NavigationTree, parse_link, link_target_id

logger = logging.getLogger(__name__)

CONTENT_CHANGEFREQ = ChangeFrequency.WEEKLY
CONTENT_PRIORITY = 0.6


def build_article_index(tree: NavigationTree) -> Dict[int, int]:
    """
    Map article id -> id of the first menu item (in tree order) that shows
    exactly that article.
    """
    index: Dict[int, int] = {}
    for node in tree:
        params = parse_link(node.link)
        if params.get("view") != "article":
            continue
        article_id = link_target_id(params)
        if article_id is not None and article_id not in index:
            index[article_id] = node.id
    return index


def resolve_content_path(
    item: ContentItem,
    tree: NavigationTree,
    category_index: Dict[int, int],
    article_index: Dict[int, int],
) -> Optional[str]:
    """Canonical path of an article relative to the site root, or None"""
    if item.catid is not None and item.catid in category_index and item.alias:
        menu_path = tree.path_for(category_index[item.catid])
        if menu_path:
            return f"{menu_path}/{item.alias}"

    node_id = article_index.get(item.id)
    if node_id is not None:
        node = tree.get(node_id)
        path = tree.path_for(node_id) or (node.alias if node else "")
        if path:
            return path

    return None


def build_content_entries(
    items: Iterable[ContentItem],
    tree: NavigationTree,
    category_index: Dict[int, int],
    base_url: str,
) -> List[SitemapEntry]:
    """Sitemap entries for every article that resolves to a menu-based path"""
    base = base_url.rstrip("/")
    article_index = build_article_index(tree)
    entries: List[SitemapEntry] = []
    skipped = 0

    for item in items:
        path = resolve_content_path(item, tree, category_index, article_index)
        if not path:
            skipped += 1
            logger.debug(f"Article {item.id} ({item.alias!r}) has no menu-based URL, skipping")
            continue

        entries.append(SitemapEntry(
            loc=f"{base}/{path}",
            lastmod=item.last_modified,
            changefreq=CONTENT_CHANGEFREQ,
            priority=CONTENT_PRIORITY,
        ))

    if skipped:
        logger.info(f"Skipped {skipped} articles without a menu-based URL")
    return entries
