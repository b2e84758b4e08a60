"""Application configuration settings."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_default_database_url() -> str:
    """Get the default database URL, using Fly Volume path if available."""
    if os.path.isdir("/data"):
        return "sqlite:////data/estatehub.db"
    return "sqlite:///./estatehub.db"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "EstateHub"
    VERSION: str = "0.1.0"
    DEBUG: bool = True
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Public base URL used for sitemap.xml and robots.txt
    SITE_URL: str = "http://localhost:8000"

    # Database - defaults to Fly Volume path if /data exists
    DATABASE_URL: str = _get_default_database_url()

    # JWT Authentication
    SECRET_KEY: str = "your-secret-key-change-this-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # Uploaded property media
    MEDIA_DIR: str = "./media"
    MEDIA_URL_PREFIX: str = "/media"

    # Listing behaviour
    COMPARE_MAX_PROPERTIES: int = 3
    SEARCH_DEFAULT_LIMIT: int = 100
    SEARCH_LOCATION_LIMIT: int = 200
    SEARCH_SUGGESTIONS_LIMIT: int = 5
    SIMILAR_PROPERTIES_LIMIT: int = 3
    FEATURED_VIDEOS_LIMIT: int = 6
    PAGE_SIZE: int = 12


settings = Settings()
