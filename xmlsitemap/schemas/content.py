"""
Pydantic schemas for published content items
"""

from pydantic import BaseModel, Field, validator
from typing import Optional
from datetime import datetime

class ContentItem(BaseModel):
    """Published article joined with its owning category"""

    id: int = Field(..., description="Unique article identifier")
    alias: str = Field("", description="URL-safe slug of the article")
    catid: Optional[int] = Field(None, description="Owning category identifier")
    cat_alias: str = Field("", description="Alias of the owning category")
    cat_path: str = Field("", description="Slug chain of the owning category")
    modified: Optional[datetime] = Field(None, description="Last modification timestamp")
    created: Optional[datetime] = Field(None, description="Creation timestamp")
    language: str = Field("*", description="Language tag or * for all languages")

    @validator('alias', 'cat_alias', 'cat_path', pre=True)
    def none_to_empty(cls, v):
        """NULL joins become empty strings"""
        return v or ""

    @validator('language', pre=True)
    def default_language(cls, v):
        return v or "*"

    @property
    def last_modified(self) -> Optional[datetime]:
        """Modification timestamp, or the creation timestamp when never modified"""
        return self.modified or self.created

    class Config:
        from_attributes = True
        frozen = True
