"""
Application configuration settings
"""

from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application Settings
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    ALLOWED_HOSTS: List[str] = ["*"]

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./xmlsitemap.db"

    # Public site root; derived from the request when unset
    SITE_BASE_URL: Optional[str] = None

    # Sitemap content
    INCLUDE_MENU: bool = True
    INCLUDE_ARTICLES: bool = True
    EXCLUDED_ALIASES: List[str] = ["root", "all-languages", "all-language"]
    RESERVED_COMPONENTS: List[str] = ["com_users"]
    CATEGORY_LAYOUTS: List[str] = ["blog"]

    # Monitoring and Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True

# Create settings instance
settings = Settings()

# Validate the site root override
if settings.SITE_BASE_URL and not settings.SITE_BASE_URL.startswith(("http://", "https://")):
    raise ValueError("SITE_BASE_URL must be an absolute http(s) URL")

# Database URL for SQLAlchemy
DATABASE_URL = settings.DATABASE_URL
if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)
