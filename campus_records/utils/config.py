"""
Configuration settings for the application.
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    RELOAD: bool = False
    ALLOWED_ORIGINS: str = "*"

    # Storage
    DATABASE_PATH: str = "data/database.db"
    UPLOAD_DIR: str = "uploads"

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL for the records database."""
        return f"sqlite+aiosqlite:///{self.DATABASE_PATH}"

    @property
    def allowed_origins(self) -> List[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
