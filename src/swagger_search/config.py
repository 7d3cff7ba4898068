"""Runtime settings, read from ``SWAGGER_*`` environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LIMIT = 5


class Settings(BaseSettings):
    """Where the API document lives and how the tools behave."""

    model_config = SettingsConfigDict(env_prefix="SWAGGER_", env_file=".env", extra="ignore")

    url: str | None = Field(default=None, description="File path or http(s) URL of the document")
    timeout: float = Field(default=30.0, description="Fetch timeout in seconds")
    default_limit: int = Field(default=DEFAULT_LIMIT, description="Endpoints expanded per detailed search")
    log_level: str = Field(default="INFO", description="Log level")


@lru_cache
def get_settings() -> Settings:
    return Settings()
