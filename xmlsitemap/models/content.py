"""
Content models: articles and the categories that own them
"""

from sqlalchemy import Column, String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from xmlsitemap.models.base import BaseModel

class Category(BaseModel):
    """
    Content category
    """
    __tablename__ = "categories"

    title = Column(String(255), nullable=False, default="")

    alias = Column(
        String(400),
        nullable=False,
        default="",
        index=True,
        comment="URL-safe slug of the category"
    )

    path = Column(
        String(400),
        nullable=False,
        default="",
        comment="Slug chain of the category tree"
    )

    published = Column(Integer, nullable=False, default=1)

    articles = relationship("Article", back_populates="category")

class Article(BaseModel):
    """
    Publishable content item
    """
    __tablename__ = "content"

    title = Column(String(255), nullable=False, default="")

    alias = Column(
        String(400),
        nullable=False,
        default="",
        index=True,
        comment="URL-safe slug of the article"
    )

    catid = Column(
        Integer,
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        comment="Owning category"
    )

    state = Column(
        Integer,
        nullable=False,
        default=1,
        index=True,
        comment="1 = published, 0 = unpublished, 2 = archived, -2 = trashed"
    )

    language = Column(String(7), nullable=False, default="*")

    created = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True
    )

    modified = Column(
        DateTime(timezone=True),
        nullable=True,
        comment="Last modification; NULL when never edited"
    )

    category = relationship("Category", back_populates="articles")

    def __repr__(self) -> str:
        return f"<Article(id={self.id}, alias={self.alias}, catid={self.catid})>"
