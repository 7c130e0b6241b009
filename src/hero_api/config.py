import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()

STORE_BACKENDS = ("memory", "redis")
LOG_FORMATS = ("json", "text")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Store
    store_backend: str = os.getenv("HERO_STORE_BACKEND", "memory").lower()
    hero_store_key: str = os.getenv("HERO_STORE_KEY", "heroes")

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8080"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_format: str = os.getenv("LOG_FORMAT", "text").lower()

    @property
    def uses_redis(self) -> bool:
        """Check if heroes should be persisted in Redis."""
        return self.store_backend == "redis"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.store_backend not in STORE_BACKENDS:
            raise ValueError(
                f"HERO_STORE_BACKEND must be one of {list(STORE_BACKENDS)}, "
                f"got {self.store_backend!r}"
            )

        if self.log_format not in LOG_FORMATS:
            raise ValueError(
                f"LOG_FORMAT must be one of {list(LOG_FORMATS)}, got {self.log_format!r}"
            )


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
