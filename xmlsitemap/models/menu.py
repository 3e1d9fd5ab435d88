"""
Menu item model for the site navigation hierarchy
"""

from sqlalchemy import Column, String, Text, Integer
from sqlalchemy.orm import validates

from xmlsitemap.models.base import BaseModel

class MenuItem(BaseModel):
    """
    One entry of a site menu, stored as a nested set ordered by ``lft``
    """
    __tablename__ = "menu"

    menutype = Column(
        String(24),
        nullable=False,
        default="mainmenu",
        index=True,
        comment="Menu (navigation group) this item belongs to"
    )

    title = Column(
        String(255),
        nullable=False,
        default="",
        comment="Display title of the menu item"
    )

    alias = Column(
        String(400),
        nullable=False,
        default="",
        index=True,
        comment="URL-safe slug of the menu item"
    )

    path = Column(
        String(1024),
        nullable=False,
        default="",
        comment="Slug chain from the menu root down to this item"
    )

    link = Column(
        Text,
        nullable=False,
        default="",
        comment="Target descriptor, e.g. index.php?option=com_content&view=article&id=1"
    )

    type = Column(
        String(16),
        nullable=False,
        default="component",
        comment="component, url, alias, separator or heading"
    )

    published = Column(
        Integer,
        nullable=False,
        default=1,
        index=True,
        comment="1 = published, 0 = unpublished, -2 = trashed"
    )

    parent_id = Column(
        Integer,
        nullable=True,
        default=1,
        index=True,
        comment="Identifier of the parent menu item"
    )

    level = Column(
        Integer,
        nullable=False,
        default=1,
        comment="Depth in the menu tree; the root item is level 0"
    )

    client_id = Column(
        Integer,
        nullable=False,
        default=0,
        comment="0 = site (frontend), 1 = administrator"
    )

    language = Column(
        String(7),
        nullable=False,
        default="*",
        comment="Language tag or * for all languages"
    )

    lft = Column(
        Integer,
        nullable=False,
        default=0,
        index=True,
        comment="Nested set left value, defines traversal order"
    )

    @validates('type')
    def validate_type(self, key: str, value: str) -> str:
        """
        Validate the menu item type
        """
        valid_types = ['component', 'url', 'alias', 'separator', 'heading']
        if value not in valid_types:
            raise ValueError(f"Menu item type must be one of: {', '.join(valid_types)}")
        return value

    def __repr__(self) -> str:
        return f"<MenuItem(id={self.id}, alias={self.alias}, menutype={self.menutype})>"
