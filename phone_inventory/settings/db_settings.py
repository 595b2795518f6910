from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    SYNC_DATABASE_URL: str = Field("sqlite:///./phones.db")

    # Logging
    LOG_LEVEL: str = Field("INFO")
    JSON_LOGS: bool = Field(False)

    # HTTP
    VALIDATION_STATUS_CODE: int = Field(401)  # 422 для привычной семантики
    DELETE_STATUS_CODE: int = Field(204)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


