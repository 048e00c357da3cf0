"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "MINEOPS"
    app_version: str = "0.1.0"
    database_url: str = "postgresql+psycopg://mineops:mineops@db:5432/mineops"
    database_echo: bool = False
    database_pool_pre_ping: bool = True
    # Compared case-insensitively against Equipment.status
    broken_status: str = "BROKEN"
    log_level: str = "INFO"
    log_json: bool = True
    service_name: str = "mineops"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()

__all__ = ["settings", "Settings"]
