"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Media-host and identity credentials are handed to their clients in the
      lifespan, never written to library-global config

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://store:store@db:5432/store_admin"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Media host (Cloudinary)
    cloudinary_cloud_name: str = "cloud-placeholder"
    cloudinary_api_key: str = "key-placeholder"
    cloudinary_api_secret: str = "secret-placeholder"
    media_delete_max_retries: int = 3
    media_delete_base_delay_ms: int = 500
    media_delete_max_delay_ms: int = 10_000

    # Billboard delete leaves its asset on the media host unless enabled
    billboard_delete_removes_media: bool = False

    # Identity provider session tokens
    auth_jwt_key: str = ""
    auth_jwt_algorithms: list[str] = ["RS256"]
    auth_jwt_issuer: str | None = None

    # API
    public_api_url: str = "http://localhost:8000"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
