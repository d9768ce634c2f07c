"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - page_size is fixed per process; the remote endpoint receives it as `rows`

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box against the public dataset
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Search endpoint
    opendatasoft_base_url: str = (
        "https://public.opendatasoft.com/api/records/1.0/search/"
    )
    opendatasoft_dataset: str = "geonames-all-cities-with-a-population-1000"
    page_size: int = Field(10, ge=1, le=100)
    http_timeout_seconds: float = Field(10.0, gt=0)

    # Navigation
    weather_path_prefix: str = "/weather"

    @field_validator("weather_path_prefix", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """'/weather/' and '/weather' produce the same paths."""
        if isinstance(v, str):
            return "/" + v.strip("/") if v.strip("/") else ""
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
