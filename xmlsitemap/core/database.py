"""
Database configuration and session management
"""

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from typing import Any, Dict
import logging

from xmlsitemap.core.config import settings, DATABASE_URL

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> Dict[str, Any]:
    """
    Pool settings per backend; SQLite in-memory databases share one connection
    """
    if url.startswith("sqlite"):
        options: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options

    return {
        "pool_pre_ping": True,
        "pool_recycle": 300,
        "pool_size": 10,
        "max_overflow": 20,
    }

# Create SQLAlchemy engine
engine = create_engine(
    DATABASE_URL,
    echo=settings.DEBUG,  # Log SQL queries in debug mode
    **_engine_options(DATABASE_URL),
)

# Create SessionLocal class
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False  # Keep objects accessible after commit
)

# Add connection event listeners for better debugging
if settings.DEBUG:
    @event.listens_for(engine, "connect")
    def receive_connect(dbapi_connection, connection_record):
        """Log new database connections"""
        logger.debug("Database connection established")

    @event.listens_for(engine, "checkout")
    def receive_checkout(dbapi_connection, connection_record, connection_proxy):
        """Log when connection is checked out from pool"""
        logger.debug("Connection checked out from pool")
