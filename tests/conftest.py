from __future__ import annotations

import os

# Configure an isolated in-memory database before the application is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ.pop("SITE_BASE_URL", None)

from contextlib import nullcontext
from collections.abc import Callable, Iterator
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from xmlsitemap import models  # noqa: F401
from xmlsitemap.core.database import SessionLocal
from xmlsitemap.core.database_utils import create_all_tables, drop_all_tables
from xmlsitemap.main import app
from xmlsitemap.services.data_provider import StaticDataProvider


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def db_session() -> Iterator[Session]:
    """Fresh schema in the shared in-memory database."""
    create_all_tables()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        drop_all_tables()


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Test client; server errors come back as responses instead of being raised."""
    original_factory = app.state.provider_factory
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.state.provider_factory = original_factory


@pytest.fixture
def use_static_records(client: TestClient) -> Callable[..., None]:
    """Serve the given menu items and articles instead of the database."""

    def _install(nodes=(), items=()) -> None:
        provider = StaticDataProvider(nodes, items)
        app.state.provider_factory = lambda: nullcontext(provider)

    return _install
