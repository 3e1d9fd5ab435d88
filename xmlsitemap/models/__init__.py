"""
Database models package
"""

from .base import Base, BaseModel
from .menu import MenuItem
from .content import Article, Category

__all__ = [
    "Base", "BaseModel", "MenuItem", "Article", "Category"
]
