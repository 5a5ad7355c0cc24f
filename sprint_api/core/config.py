from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = Field("sprintApi", alias="APP_NAME")
    api_prefix: str = Field("/api", alias="API_PREFIX")

    database_url: str = Field("sqlite:///./sprints.db", alias="DATABASE_URL")
    sql_log_enabled: bool = Field(False, alias="SQL_LOG_ENABLED")

    page_default_size: int = Field(20, alias="PAGE_DEFAULT_SIZE")
    page_max_size: int = Field(2000, alias="PAGE_MAX_SIZE")

    log_level: str = Field("INFO", alias="LOG_LEVEL")


settings = Settings()
