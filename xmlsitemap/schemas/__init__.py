"""
Pydantic schemas for records consumed and produced by the sitemap generator
"""

from .navigation import NavigationNode, ALL_LANGUAGES
from .content import ContentItem
from .sitemap import ChangeFrequency, SitemapEntry, SitemapOptions

__all__ = [
    # Source records
    "NavigationNode", "ALL_LANGUAGES", "ContentItem",
    # Sitemap output
    "ChangeFrequency", "SitemapEntry", "SitemapOptions"
]
