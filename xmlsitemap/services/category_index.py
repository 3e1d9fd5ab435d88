"""
Category-to-navigation index: which menu item lists a given content category
"""

import logging
from typing import Dict, Iterable, Optional

from xmlsitemap.services.navigation_tree import NavigationTree, parse_link, link_target_id

logger = logging.getLogger(__name__)


def is_category_listing(params: Dict[str, str], layouts: Optional[Iterable[str]] = None) -> bool:
    """
    True for ``view=category`` links whose layout is one of ``layouts``.
    An empty or missing ``layouts`` accepts every category layout.
    """
    if params.get("view") != "category":
        return False
    allowed = list(layouts or [])
    if not allowed:
        return True
    return params.get("layout", "") in allowed


def build_category_index(tree: NavigationTree, layouts: Optional[Iterable[str]] = None) -> Dict[int, int]:
    """
    Map category id -> menu item id for every category listing menu item.

    When several menu items list the same category the last one in tree
    order wins.
    """
    layouts = list(layouts or [])
    index: Dict[int, int] = {}

    for node in tree:
        params = parse_link(node.link)
        if not is_category_listing(params, layouts):
            continue

        category_id = link_target_id(params)
        if category_id is None:
            logger.debug(f"Skipping menu item {node.id}: no category id in link {node.link!r}")
            continue

        if category_id in index:
            logger.debug(
                f"Category {category_id} listed by menu items {index[category_id]} and {node.id}; "
                f"using {node.id}"
            )
        index[category_id] = node.id

    return index
