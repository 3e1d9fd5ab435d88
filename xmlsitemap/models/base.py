"""
Base model class with common fields and functionality
"""

from sqlalchemy import Column, Integer
from sqlalchemy.orm import declarative_base

# Create the base class
Base = declarative_base()

class BaseModel(Base):
    """
    Base model class that provides common fields and functionality
    for all database models
    """
    __abstract__ = True

    # Primary key; the CMS tables use integer identifiers
    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        nullable=False,
        index=True
    )

    def __repr__(self) -> str:
        """
        String representation of the model
        """
        return f"<{self.__class__.__name__}(id={self.id})>"
