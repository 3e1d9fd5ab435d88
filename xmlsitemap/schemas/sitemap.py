"""
Pydantic schemas for sitemap entries and generation options
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from enum import Enum

class ChangeFrequency(str, Enum):
    """Sitemap protocol change frequency hints"""
    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"

class SitemapEntry(BaseModel):
    """One <url> element of the sitemap"""

    loc: str = Field(..., min_length=1, description="Absolute canonical location")
    lastmod: Optional[datetime] = Field(None, description="Last modification time")
    changefreq: Optional[ChangeFrequency] = Field(None, description="Change frequency hint")
    priority: Optional[float] = Field(None, ge=0.0, le=1.0, description="Relative priority")

    @property
    def normalized_loc(self) -> str:
        """Location with a single trailing slash removed, used for deduplication"""
        if self.loc.endswith("/"):
            return self.loc[:-1]
        return self.loc

class SitemapOptions(BaseModel):
    """Options controlling which URLs end up in the sitemap"""

    include_menu: bool = Field(True, description="Include navigation entries")
    include_articles: bool = Field(True, description="Include content entries")
    excluded_aliases: List[str] = Field(
        default_factory=lambda: ["root", "all-languages", "all-language"],
        description="Aliases (and path fragments) never listed"
    )
    reserved_components: List[str] = Field(
        default_factory=lambda: ["com_users"],
        description="System components whose menu items are never listed"
    )
    category_layouts: List[str] = Field(
        default_factory=lambda: ["blog"],
        description="Category view layouts that act as an article's home; empty accepts any"
    )

    @classmethod
    def from_settings(cls, settings) -> "SitemapOptions":
        """Build options from application settings"""
        return cls(
            include_menu=settings.INCLUDE_MENU,
            include_articles=settings.INCLUDE_ARTICLES,
            excluded_aliases=list(settings.EXCLUDED_ALIASES),
            reserved_components=list(settings.RESERVED_COMPONENTS),
            category_layouts=list(settings.CATEGORY_LAYOUTS),
        )
