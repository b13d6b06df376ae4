import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()

STORE_BACKENDS = ("memory", "sqlite", "redis")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Store
    store_backend: str = os.getenv("STORE_BACKEND", "memory").lower()
    database_url: str = os.getenv("DATABASE_URL", "pokemon.db")

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")
    redis_key_prefix: str = os.getenv("REDIS_KEY_PREFIX", "pokemon")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "4444"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str | None = os.getenv("LOG_FILE")

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.store_backend not in STORE_BACKENDS:
            raise ValueError(
                f"STORE_BACKEND must be one of {list(STORE_BACKENDS)}, got {self.store_backend!r}"
            )

        if not self.redis_key_prefix:
            raise ValueError("REDIS_KEY_PREFIX must not be empty")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )
