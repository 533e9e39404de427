from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables or a .env file."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    APP_NAME: str = "API Gateway Demo"
    APP_DESCRIPTION: str = "Demo REST API for API gateway integration"
    APP_VERSION: str = "1.0.0"
    # Echoed in X-API-Version when the client does not send one
    API_VERSION: str = "1.0"

    # Database
    DATABASE_URL: str = "sqlite:///./gateway_demo.db"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20

    # Logging
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Products listed by /products/low-stock when no threshold is given
    LOW_STOCK_THRESHOLD: int = 10


@lru_cache
def get_settings() -> Settings:
    return Settings()
