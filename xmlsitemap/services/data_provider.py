"""
Data providers feeding the sitemap generator with menu and content snapshots
"""

import logging
from contextlib import contextmanager
from typing import Generator, Iterable, List, Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from xmlsitemap.core.database_utils import get_db_session
from xmlsitemap.models.content import Article, Category
from xmlsitemap.models.menu import MenuItem
from xmlsitemap.schemas.content import ContentItem
from xmlsitemap.schemas.navigation import NavigationNode

logger = logging.getLogger(__name__)

PUBLISHED = 1
SITE_CLIENT = 0


class DataProviderError(Exception):
    """Raised when menu or content records cannot be fetched"""
    pass


class SitemapDataProvider(Protocol):
    """Source of the records a sitemap is built from"""

    def fetch_navigation_nodes(self) -> List[NavigationNode]:
        """Published site menu items, ancestors before descendants"""
        ...

    def fetch_content_items(self) -> List[ContentItem]:
        """Published articles joined with their category alias and path"""
        ...


class DatabaseDataProvider:
    """Reads menu items and articles through a SQLAlchemy session"""

    def __init__(self, db: Session):
        self.db = db

    def fetch_navigation_nodes(self) -> List[NavigationNode]:
        query = (
            select(MenuItem)
            .where(MenuItem.published == PUBLISHED)
            .where(MenuItem.client_id == SITE_CLIENT)
            .order_by(MenuItem.lft)
        )
        try:
            items = self.db.execute(query).scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to load menu items: {e}")
            raise DataProviderError(f"Failed to load menu items: {e}") from e

        return [NavigationNode.model_validate(item) for item in items]

    def fetch_content_items(self) -> List[ContentItem]:
        query = (
            select(
                Article.id,
                Article.alias,
                Article.catid,
                Article.modified,
                Article.created,
                Article.language,
                Category.alias.label("cat_alias"),
                Category.path.label("cat_path"),
            )
            .outerjoin(Category, Category.id == Article.catid)
            .where(Article.state == PUBLISHED)
            .order_by(Article.created.desc())
        )
        try:
            rows = self.db.execute(query).all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to load articles: {e}")
            raise DataProviderError(f"Failed to load articles: {e}") from e

        return [ContentItem(**row._mapping) for row in rows]


class StaticDataProvider:
    """Serves records that were fetched elsewhere or built in memory"""

    def __init__(self, nodes: Iterable[NavigationNode] = (), items: Iterable[ContentItem] = ()):
        self.nodes = list(nodes)
        self.items = list(items)

    def fetch_navigation_nodes(self) -> List[NavigationNode]:
        return list(self.nodes)

    def fetch_content_items(self) -> List[ContentItem]:
        return list(self.items)


@contextmanager
def database_provider() -> Generator[DatabaseDataProvider, None, None]:
    """
    Provider bound to a fresh session for one sitemap request
    """
    with get_db_session() as db:
        yield DatabaseDataProvider(db)
