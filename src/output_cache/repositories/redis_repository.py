"""Redis implementation of DistributedCache.

Entries are plain string keys written with ``SET key value EX ttl``, so a
write is a single atomic overwrite and expiry is handled by Redis.
"""

import redis.asyncio as redis

from output_cache.config import get_redis_client, settings


class RedisDistributedCache:
    """Redis-backed distributed cache.

    This class satisfies the DistributedCache protocol through structural
    typing - no explicit inheritance needed.

    Keys are prefixed with ``"{instance_name}:"`` when an instance name is
    configured, so several applications can share one Redis database.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        instance_name: str | None = None,
    ) -> None:
        """Initialize the Redis distributed cache.

        Args:
            redis_client: Async Redis client. If None, creates default.
            instance_name: Key prefix. If None, uses settings.
        """
        self._client = redis_client or get_redis_client()
        name = settings.redis_instance_name if instance_name is None else instance_name
        self._prefix = f"{name}:" if name else ""

    @classmethod
    def create(cls, instance_name: str | None = None) -> "RedisDistributedCache":
        """Factory method to create RedisDistributedCache with defaults.

        Args:
            instance_name: Key prefix. If None, uses settings.

        Returns:
            Configured RedisDistributedCache
        """
        return cls(instance_name=instance_name)

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def get(self, key: str) -> str | None:
        """Read the payload stored under a key.

        Args:
            key: The cache key, without instance prefix

        Returns:
            The stored payload, or None if absent or expired
        """
        value = await self._client.get(self._key(key))
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store a payload with an expiration relative to now.

        Args:
            key: The cache key, without instance prefix
            value: The payload to store
            ttl_seconds: Time-to-live in seconds
        """
        await self._client.set(self._key(key), value, ex=ttl_seconds)

    async def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(await self._client.ping())
        except redis.RedisError:
            return False

    async def close(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client

    @property
    def prefix(self) -> str:
        """Get the key prefix applied to every key."""
        return self._prefix
