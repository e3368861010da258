"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every tunable comes from an environment variable (or .env) with a working default
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - CORS and body parsing declared here instead of relying on framework defaults
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # MongoDB
    mongo_url: str = "mongodb://localhost:27017"
    mongo_database: str = "todo-app"
    mongo_collection: str = "todos"
    mongo_server_selection_timeout_ms: int = 5000

    @field_validator("mongo_url")
    @classmethod
    def check_mongo_scheme(cls, v: str) -> str:
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError("mongo_url must start with mongodb:// or mongodb+srv://")
        return v

    # API
    cors_origins: list[str] = ["*"]
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]
    max_body_bytes: int = 100 * 1024

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
