"""Tests for menu item exclusion rules and menu URL entries."""

from __future__ import annotations

import pytest

from tests.factories import BASE_URL, ROOT, category_link, make_node
from xmlsitemap.schemas.sitemap import ChangeFrequency, SitemapOptions
from xmlsitemap.services.menu_urls import build_menu_entries, exclusion_reason
from xmlsitemap.services.navigation_tree import NavigationTree


def _locations(nodes, now, options: SitemapOptions | None = None) -> list[str]:
    tree = NavigationTree(nodes)
    return [entry.loc for entry in build_menu_entries(tree, options or SitemapOptions(), BASE_URL, now)]


@pytest.mark.parametrize("node_type", ["separator", "heading", "url", "alias"])
def test_structural_types_are_excluded(node_type: str, now) -> None:
    node = make_node(2, "section", type=node_type)

    assert _locations([ROOT, node], now) == []


def test_external_links_are_excluded(now) -> None:
    node = make_node(2, "partner", link="https://partner.example.org/")

    assert _locations([node], now) == []


def test_root_alias_is_always_excluded(now) -> None:
    node = make_node(2, "root", path="somewhere", language="en-GB", link=category_link(5))

    assert exclusion_reason(node, "en/somewhere", SitemapOptions()) == "root or empty alias"
    assert _locations([node], now) == []


@pytest.mark.parametrize(
    ("alias", "path"),
    [
        ("all-languages", "all-languages"),
        ("all-language", "all-language"),
        ("news", "all-languages/news"),
        ("", ""),
    ],
)
def test_excluded_aliases_and_paths(alias: str, path: str, now) -> None:
    assert _locations([make_node(2, alias, path=path)], now) == []


def test_custom_exclusion_set(now) -> None:
    options = SitemapOptions(excluded_aliases=["internal"])
    nodes = [make_node(2, "internal"), make_node(3, "docs", path="internal/docs"), make_node(4, "all-languages")]

    assert _locations(nodes, now, options) == [f"{BASE_URL}/all-languages"]


def test_system_components_are_excluded(now) -> None:
    node = make_node(2, "login", link="index.php?option=com_users&view=login")

    assert _locations([node], now) == []


def test_listed_menu_item_entry(now) -> None:
    nodes = [
        ROOT,
        make_node(2, "about", language="de-DE"),
        make_node(3, "team", path="about/team", parent_id=2, level=2, language="de-DE"),
    ]
    entries = build_menu_entries(NavigationTree(nodes), SitemapOptions(), BASE_URL + "/", now)

    assert [entry.loc for entry in entries] == [f"{BASE_URL}/de/about", f"{BASE_URL}/de/about/team"]
    for entry in entries:
        assert entry.changefreq is ChangeFrequency.WEEKLY
        assert entry.priority == 0.8
        assert entry.lastmod == now


def test_exclusion_reason_none_for_regular_item() -> None:
    node = make_node(2, "contact")

    assert exclusion_reason(node, "contact", SitemapOptions()) is None
    assert exclusion_reason(node, "/", SitemapOptions()) == "empty path"
