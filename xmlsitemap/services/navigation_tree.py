"""
Navigation tree loader.

Indexes the flat, ``lft``-ordered menu snapshot by identifier and resolves the
public path of every menu item once per generation run:

    language prefix ("en/" for en-GB, nothing for "*") + hierarchy path

The hierarchy path is the ``path`` column the CMS precomputes. Sources that
only provide parent links get it derived from the parent chain instead.
"""

import logging
import re
from typing import Dict, Iterable, Iterator, Optional, Set
from urllib.parse import parse_qsl, urlsplit

from xmlsitemap.schemas.navigation import NavigationNode, ALL_LANGUAGES

logger = logging.getLogger(__name__)

_LEADING_DIGITS = re.compile(r"\d+")


def parse_link(link: str) -> Dict[str, str]:
    """
    Split a target descriptor such as
    ``index.php?option=com_content&view=article&id=12`` into its parameters.
    """
    if not link:
        return {}
    return dict(parse_qsl(urlsplit(link).query, keep_blank_values=True))


def link_target_id(params: Dict[str, str]) -> Optional[int]:
    """
    Numeric ``id`` of a parsed link; ``"12:some-slug"`` yields 12.
    Returns None when the link carries no usable identifier.
    """
    match = _LEADING_DIGITS.match(params.get("id", ""))
    if not match:
        return None
    return int(match.group(0))


def language_prefix(language: Optional[str]) -> str:
    """URL prefix for a language tag: ``"en-GB"`` -> ``"en/"``, ``"*"`` -> ``""``"""
    if not language or language == ALL_LANGUAGES:
        return ""
    return language[:2] + "/"


class NavigationTree:
    """
    Identifier-indexed menu snapshot with resolved paths.

    Built fresh for every sitemap; never mutated after construction.
    """

    def __init__(self, nodes: Iterable[NavigationNode]):
        self.nodes: Dict[int, NavigationNode] = {}
        for node in nodes:
            self.nodes[node.id] = node

        self._hierarchy: Dict[int, str] = {}
        self.paths: Dict[int, str] = {}
        for node in self.nodes.values():
            hierarchy = self._hierarchy_path(node, set())
            # A bare language prefix is not a usable path
            self.paths[node.id] = language_prefix(node.language) + hierarchy if hierarchy else ""

        logger.debug(f"Loaded navigation tree with {len(self.nodes)} nodes")

    def _hierarchy_path(self, node: NavigationNode, seen: Set[int]) -> str:
        if node.id in self._hierarchy:
            return self._hierarchy[node.id]

        if node.path:
            result = node.path
        else:
            result = node.alias
            parent = self.nodes.get(node.parent_id) if node.parent_id is not None else None
            # Level 0 is the menu root, which contributes no slug
            if (node.alias and parent is not None and parent.level > 0
                    and parent.id != node.id and parent.id not in seen):
                seen.add(node.id)
                parent_path = self._hierarchy_path(parent, seen)
                if parent_path:
                    result = f"{parent_path}/{node.alias}"

        self._hierarchy[node.id] = result
        return result

    def path_for(self, node_id: int) -> str:
        """Resolved path of a node, empty when unknown"""
        return self.paths.get(node_id, "")

    def get(self, node_id: int) -> Optional[NavigationNode]:
        return self.nodes.get(node_id)

    def __iter__(self) -> Iterator[NavigationNode]:
        return iter(self.nodes.values())

    def __len__(self) -> int:
        return len(self.nodes)
