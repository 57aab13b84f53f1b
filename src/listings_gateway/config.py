"""
Configuration management for the listings gateway
"""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Upstream REST service
    upstream_base_url: str = "https://rt-airlock-services-listing.herokuapp.com/"
    upstream_timeout: float = 10.0  # seconds

    # Response cache
    cache_backend: Literal["memory", "redis"] = "memory"
    cache_default_ttl: int = 0  # seconds; 0 = only cache when upstream sends max-age
    cache_max_entries: int = 1024
    cache_key_prefix: str = "listings-gateway:http:"
    redis_url: str = "redis://localhost:6379"

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]
    graphiql: bool = True

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("upstream_base_url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        # Relative routes are joined onto the base, which must be a directory URL
        return value if value.endswith("/") else value + "/"

    class Config:
        env_file = ".env"
        env_prefix = "LISTINGS_"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
