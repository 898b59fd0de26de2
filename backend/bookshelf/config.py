"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden with a BOOKSHELF_-prefixed env var
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults: 127.0.0.1:8080, socket at /api/v1/, 1 MiB frames
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bookshelf.core.domain_types import IdStrategy, LogFormat


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BOOKSHELF_", env_file=".env", case_sensitive=False,
    )

    # Server
    host: str = "127.0.0.1"
    port: int = 8080
    ws_path: str = "/api/v1/"
    # continuation frames are aggregated by uvicorn up to this many bytes
    ws_max_size: int = 2 ** 20

    # Store
    id_strategy: IdStrategy = IdStrategy.TIMESTAMP
    record_label: str = "Book"
    seed_sample_record: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.JSON

    @field_validator("ws_path")
    @classmethod
    def ensure_leading_slash(cls, v: str) -> str:
        return v if v.startswith("/") else f"/{v}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
