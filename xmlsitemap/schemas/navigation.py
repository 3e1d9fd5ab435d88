"""
Pydantic schemas for navigation (menu) records
"""

from pydantic import BaseModel, Field, validator
from typing import Optional

ALL_LANGUAGES = "*"

class NavigationNode(BaseModel):
    """Read-only snapshot of one menu item"""

    id: int = Field(..., description="Unique menu item identifier")
    alias: str = Field("", description="URL-safe slug")
    path: str = Field("", description="Precomputed slug chain from the menu root, may be empty")
    link: str = Field("", description="Target descriptor of the menu item")
    type: str = Field("component", description="component, url, alias, separator or heading")
    parent_id: Optional[int] = Field(None, description="Parent menu item identifier")
    level: int = Field(1, ge=0, description="Depth in the menu tree")
    language: str = Field(ALL_LANGUAGES, description="Language tag or * for all languages")
    menutype: str = Field("", description="Navigation group")
    lft: int = Field(0, description="Ordering key")

    @validator('alias', 'path', 'link', 'menutype', pre=True)
    def none_to_empty(cls, v):
        """NULL text columns become empty strings"""
        return v or ""

    @validator('language', pre=True)
    def default_language(cls, v):
        """Missing language means all languages"""
        return v or ALL_LANGUAGES

    class Config:
        from_attributes = True
        frozen = True
