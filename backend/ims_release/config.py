"""
Application Configuration
Uses Pydantic Settings for environment variable management
"""

from pydantic_settings import BaseSettings
from typing import Optional
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "IMS Release"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    # Also write ims_release logs to this file when set
    LOG_FILE: Optional[str] = None

    # Database
    DATABASE_URL: str = "sqlite:///./data/ims_release.db"

    # Page image storage (blob store root)
    IMAGE_DIRECTORY: str = "./data/images"

    # Scanlation group credited on every release
    SCANLATOR: str = "ims"

    # Required in the Auth-Token header of POST/PUT/DELETE requests when set
    AUTH_TOKEN: Optional[str] = None

    # Thumbnail bounds in pixels
    THUMBNAIL_MAX_WIDTH: int = 200
    THUMBNAIL_MAX_HEIGHT: int = 300

    # API Settings
    API_PREFIX: str = ""
    CORS_ORIGINS: list = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
