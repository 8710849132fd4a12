"""Distributed cache protocol.

Defines the key-value interface the response cache interceptor consumes.
Any backend offering string get/set with a relative expiration satisfies it.

Implementations can include:
- Redis (default, see ``repositories.RedisDistributedCache``)
- Memcached
- In-memory fakes for tests
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class DistributedCache(Protocol):
    """Protocol for distributed key-value caches.

    Implementations must be safe for concurrent use by many requests on the
    same event loop. Writes are unconditional overwrites: the last writer
    wins.

    Example:
        ```python
        from output_cache.protocols import DistributedCache

        cache: DistributedCache = RedisDistributedCache(client)
        ```
    """

    async def get(self, key: str) -> str | None:
        """Read the payload stored under a key.

        Args:
            key: The cache key

        Returns:
            The stored payload, or None if absent or expired
        """
        ...

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store a payload under a key.

        Args:
            key: The cache key
            value: The payload to store
            ttl_seconds: Expiration relative to now, in seconds
        """
        ...
