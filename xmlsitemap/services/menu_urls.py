"""
Navigation URL resolver: one sitemap entry per listable menu item
"""

import logging
from datetime import datetime
from typing import List, Optional

from xmlsitemap.schemas.navigation import NavigationNode
from xmlsitemap.schemas.sitemap import ChangeFrequency, SitemapEntry, SitemapOptions
from xmlsitemap.services.navigation_tree import NavigationTree

logger = logging.getLogger(__name__)

MENU_CHANGEFREQ = ChangeFrequency.WEEKLY
MENU_PRIORITY = 0.8

ROOT_ALIAS = "root"

# Menu item types that never point at a page of their own
STRUCTURAL_TYPES = frozenset({"separator", "heading", "url", "alias"})


def exclusion_reason(node: NavigationNode, resolved_path: str, options: SitemapOptions) -> Optional[str]:
    """
    Why a menu item stays out of the sitemap, or None when it is listed.
    Rules are checked in order and the first match wins.
    """
    if node.type in STRUCTURAL_TYPES:
        return f"structural type {node.type!r}"

    if node.link.startswith("http"):
        return "external link"

    if not node.alias or node.alias == ROOT_ALIAS:
        return "root or empty alias"

    if node.alias in options.excluded_aliases:
        return f"excluded alias {node.alias!r}"

    for excluded in options.excluded_aliases:
        if excluded and excluded in node.path:
            return f"path contains excluded alias {excluded!r}"

    for component in options.reserved_components:
        if component and component in node.link:
            return f"system component {component!r}"

    if not resolved_path or resolved_path in (ROOT_ALIAS, "/"):
        return "empty path"

    return None


def build_menu_entries(
    tree: NavigationTree,
    options: SitemapOptions,
    base_url: str,
    now: datetime,
) -> List[SitemapEntry]:
    """Sitemap entries for every menu item that survives the exclusion rules"""
    base = base_url.rstrip("/")
    entries: List[SitemapEntry] = []

    for node in tree:
        path = tree.path_for(node.id)
        reason = exclusion_reason(node, path, options)
        if reason:
            logger.debug(f"Skipping menu item {node.id} ({node.alias!r}): {reason}")
            continue

        entries.append(SitemapEntry(
            loc=f"{base}/{path}",
            lastmod=now,
            changefreq=MENU_CHANGEFREQ,
            priority=MENU_PRIORITY,
        ))

    return entries
