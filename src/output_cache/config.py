import os
import ssl
from dataclasses import dataclass
from functools import lru_cache

import redis.asyncio as redis
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redis
    redis_host: str = os.getenv("REDIS_HOST", "localhost")
    redis_port: int = int(os.getenv("REDIS_PORT", "6379"))
    redis_password: str | None = os.getenv("REDIS_PASSWORD")
    redis_instance_name: str = os.getenv("REDIS_INSTANCE_NAME", "")

    # Redis TLS
    redis_use_ssl: bool = os.getenv("REDIS_USE_SSL", "false").lower() == "true"
    redis_ssl_certfile: str | None = os.getenv("REDIS_SSL_CERTFILE")
    redis_ssl_keyfile: str | None = os.getenv("REDIS_SSL_KEYFILE")
    redis_ssl_cert_reqs: str = os.getenv("REDIS_SSL_CERT_REQS", "required")

    # Output cache
    cache_duration_seconds: int = int(os.getenv("CACHE_DURATION_SECONDS", "60"))

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    @property
    def redis_url(self) -> str:
        """Build the Redis URL from host, port and TLS flag.

        Returns:
            A ``redis://`` or ``rediss://`` URL
        """
        scheme = "rediss" if self.redis_use_ssl else "redis"
        return f"{scheme}://{self.redis_host}:{self.redis_port}"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not 0 < self.redis_port < 65536:
            raise ValueError(f"REDIS_PORT must be between 1 and 65535, got {self.redis_port}")

        if self.cache_duration_seconds <= 0:
            raise ValueError(
                f"CACHE_DURATION_SECONDS must be positive, got {self.cache_duration_seconds}"
            )

        if self.redis_ssl_cert_reqs not in ("none", "optional", "required"):
            raise ValueError(
                f"REDIS_SSL_CERT_REQS must be one of none, optional, required, "
                f"got {self.redis_ssl_cert_reqs}"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client(config: Settings | None = None) -> redis.Redis:
    """Create an async Redis client instance.

    When TLS is enabled the connection requires TLS 1.2 or newer and presents
    the configured client certificate, if any.
    """
    config = config or settings

    ssl_options: dict = {}
    if config.redis_use_ssl:
        ssl_options = {
            "ssl_min_version": ssl.TLSVersion.TLSv1_2,
            "ssl_cert_reqs": config.redis_ssl_cert_reqs,
            "ssl_certfile": config.redis_ssl_certfile,
            "ssl_keyfile": config.redis_ssl_keyfile,
        }

    return redis.from_url(
        config.redis_url,
        password=config.redis_password,
        decode_responses=True,
        **ssl_options,
    )
