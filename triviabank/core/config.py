from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    catalog_base_url: str = Field(default="http://localhost:8000/", alias="CATALOG_BASE_URL")
    catalog_path: str = Field(default="data/questions.json", alias="CATALOG_PATH")
    catalog_timeout_seconds: float = Field(default=10.0, gt=0, alias="CATALOG_TIMEOUT_SECONDS")
    catalog_backfill_sub_categories: bool = Field(
        default=True,
        alias="CATALOG_BACKFILL_SUB_CATEGORIES",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
