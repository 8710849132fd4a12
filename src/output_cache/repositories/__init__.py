"""Repository layer for data access.

This layer hides the cache backend behind the DistributedCache protocol.
The repositories are protocol-based (structural typing), not
inheritance-based.
"""

from output_cache.protocols import DistributedCache

from .redis_repository import RedisDistributedCache

__all__ = [
    "DistributedCache",
    "RedisDistributedCache",
]
