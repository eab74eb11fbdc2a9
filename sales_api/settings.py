"""Application settings module."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    DATABASE_URL: str = "sqlite+aiosqlite:///./database.db"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    SEED_DATA_URL: str = "https://s3.amazonaws.com/roxiler.com/product_transaction.json"
    FEED_TIMEOUT_SECONDS: float = 30.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
