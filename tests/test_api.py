"""HTTP tests for the sitemap middleware and API endpoints."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from tests.factories import ROOT, article_link, category_link, make_item, make_node
from xmlsitemap.core.config import settings
from xmlsitemap.main import app
from xmlsitemap.models import Article, Category, MenuItem
from xmlsitemap.services.data_provider import DataProviderError, StaticDataProvider
from xmlsitemap.services.serializer import SITEMAP_NS, parse_sitemap

TEST_BASE = "http://testserver"

NODES = [
    ROOT,
    make_node(10, "investor-relations", language="en-GB", link=category_link(5)),
    make_node(11, "login", link="index.php?option=com_users&view=login"),
]
ITEMS = [make_item(40, "q3-results", catid=5)]


def _locations(response) -> list[str]:
    return [entry.loc for entry in parse_sitemap(response.content)]


class TestSitemapEndpoint:
    """Sitemap responses produced by the middleware."""

    def test_sitemap_is_served_as_xml(self, client: TestClient, use_static_records) -> None:
        use_static_records(NODES, ITEMS)

        response = client.get("/sitemap.xml")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/xml; charset=utf-8"
        assert response.headers["x-robots-tag"] == "noindex"
        assert _locations(response) == [
            f"{TEST_BASE}/",
            f"{TEST_BASE}/en/investor-relations",
            f"{TEST_BASE}/en/investor-relations/q3-results",
        ]

    @pytest.mark.parametrize("path", ["/SITEMAP.XML", "/en/sitemap.xml", "/sitemap.xml?nocache=1"])
    def test_path_variants_trigger_generation(self, client: TestClient, use_static_records, path: str) -> None:
        use_static_records(NODES, ITEMS)

        response = client.get(path)

        assert response.status_code == 200
        assert ET.fromstring(response.content).tag == f"{{{SITEMAP_NS}}}urlset"

    def test_ajax_channel_triggers_generation(self, client: TestClient, use_static_records) -> None:
        use_static_records(NODES, ITEMS)

        response = client.get(
            "/index.php",
            params={"option": "com_ajax", "plugin": "xmlsitemap", "group": "system", "format": "raw"},
        )

        assert response.status_code == 200
        assert len(_locations(response)) == 3

    def test_configured_base_url(self, client: TestClient, use_static_records, monkeypatch) -> None:
        monkeypatch.setattr(settings, "SITE_BASE_URL", "https://www.example.com/")
        use_static_records(NODES, ITEMS)

        locations = _locations(client.get("/sitemap.xml"))

        assert locations[0] == "https://www.example.com/"
        assert locations[-1] == "https://www.example.com/en/investor-relations/q3-results"

    def test_disabled_sections_leave_only_homepage(self, client: TestClient, use_static_records, monkeypatch) -> None:
        monkeypatch.setattr(settings, "INCLUDE_MENU", False)
        monkeypatch.setattr(settings, "INCLUDE_ARTICLES", False)
        use_static_records(NODES, ITEMS)

        root = ET.fromstring(client.get("/sitemap.xml").content)
        urls = root.findall(f"{{{SITEMAP_NS}}}url")

        assert len(urls) == 1
        assert urls[0].find(f"{{{SITEMAP_NS}}}priority").text == "1.0"

    def test_data_failure_returns_error_without_xml(self, client: TestClient) -> None:
        class FailingProvider(StaticDataProvider):
            def fetch_content_items(self):
                raise DataProviderError("content table unavailable")

        class FailingContext:
            def __enter__(self):
                return FailingProvider(NODES)

            def __exit__(self, *exc_info):
                return False

        app.state.provider_factory = FailingContext

        response = client.get("/sitemap.xml")

        assert response.status_code == 500
        assert response.headers["content-type"].startswith("application/json")
        assert response.json()["error"] == "Internal server error"

    def test_regular_routes_are_untouched(self, client: TestClient) -> None:
        assert client.get("/health").json()["status"] == "healthy"
        assert client.get("/").json()["sitemap"] == "/sitemap.xml"

    def test_cross_origin_requests_are_not_credentialed(self, client: TestClient) -> None:
        response = client.get("/health", headers={"Origin": "https://crawler.example.org"})

        assert response.headers["access-control-allow-origin"] == "*"
        assert "access-control-allow-credentials" not in response.headers


class TestSitemapPreview:
    def test_entries_as_json(self, client: TestClient, use_static_records) -> None:
        use_static_records(NODES, ITEMS)

        body = client.get("/api/v1/sitemap/entries").json()

        assert body["count"] == 3
        assert body["entries"][0]["changefreq"] == "daily"
        assert body["entries"][0]["priority"] == 1.0
        assert body["entries"][2] == {
            "loc": f"{TEST_BASE}/en/investor-relations/q3-results",
            "lastmod": "2024-01-10T08:30:00",
            "changefreq": "weekly",
            "priority": 0.6,
        }


class TestDatabaseProvider:
    """Sitemap built from rows in the database."""

    @pytest.fixture
    def seeded(self, db_session: Session) -> Session:
        db_session.add_all([
            Category(id=5, title="Investor Relations", alias="investor-relations", path="investor-relations"),
            Category(id=6, title="Uncategorised", alias="uncategorised", path="uncategorised"),
            MenuItem(id=1, alias="root", path="", link="", type="component", parent_id=None, level=0, lft=0),
            MenuItem(id=10, menutype="mainmenu", title="Investor Relations", alias="investor-relations",
                     path="investor-relations", link=category_link(5), language="en-GB", lft=3),
            MenuItem(id=11, menutype="mainmenu", title="About", alias="about", path="about",
                     link="index.php?option=com_content&view=featured", lft=1),
            MenuItem(id=12, menutype="mainmenu", title="Imprint", alias="imprint", path="imprint",
                     link=article_link(31), lft=5),
            MenuItem(id=13, menutype="mainmenu", title="Draft", alias="draft", path="draft",
                     link="index.php?option=com_content&view=featured", published=0, lft=7),
            MenuItem(id=14, menutype="menu", title="Admin", alias="admin-only", path="admin-only",
                     link="index.php?option=com_cpanel", client_id=1, lft=9),
            Article(id=30, title="Q3", alias="q3-results", catid=5,
                    created=datetime(2024, 1, 10, 8, 30), modified=datetime(2024, 2, 1, 9, 0)),
            Article(id=31, title="Imprint", alias="imprint-text", catid=6, created=datetime(2023, 5, 1)),
            Article(id=32, title="Unpublished", alias="secret", catid=5, state=0, created=datetime(2024, 3, 1)),
            Article(id=33, title="Lost", alias="lost", catid=6, created=datetime(2024, 4, 1)),
        ])
        db_session.commit()
        return db_session

    def test_sitemap_from_database(self, client: TestClient, seeded: Session) -> None:
        entries = parse_sitemap(client.get("/sitemap.xml").content)
        by_loc = {entry.loc: entry for entry in entries}

        assert [entry.loc for entry in entries] == [
            f"{TEST_BASE}/",
            f"{TEST_BASE}/about",
            f"{TEST_BASE}/en/investor-relations",
            f"{TEST_BASE}/imprint",
            f"{TEST_BASE}/en/investor-relations/q3-results",
        ]
        assert by_loc[f"{TEST_BASE}/en/investor-relations/q3-results"].lastmod.isoformat() == "2024-02-01T09:00:00+00:00"

    def test_database_health(self, client: TestClient, seeded: Session) -> None:
        body = client.get("/api/v1/database/health").json()

        assert body["status"] == "healthy"
        assert body["tables_exist"] is True
        assert client.get("/api/v1/database/connection").json()["status"] == "connected"
