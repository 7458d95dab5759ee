"""Data layer configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Data layer settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database
    database_url: str = "sqlite:///finance_data.db"
    database_echo: bool = False

    # Dispatchers
    io_max_workers: int = 4
    sync_dispatch: bool = False

