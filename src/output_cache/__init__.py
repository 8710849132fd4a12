"""Output Cache - HTTP response caching backed by a distributed cache.

This package provides a layered architecture for output caching:

Layers:
    - keys: Cache key derivation from request paths
    - interceptors: Response cache interceptor and FastAPI route class
    - protocols: Interface contracts (DistributedCache)
    - repositories: Data access implementations (Redis)
    - handlers: HTTP endpoint handlers for the demo API
    - dto: Data transfer objects (persisted and API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from fastapi import APIRouter
    from output_cache import output_cache_route

    router = APIRouter(route_class=output_cache_route(duration_in_seconds=60))
    ```

For HTTP API:
    ```python
    from output_cache.api.app import app
    ```
"""

from output_cache.config import get_redis_client, settings
from output_cache.dto import CachedResponsePayload, deserialize_entry, serialize_entry
from output_cache.entities import CacheEntry
from output_cache.interceptors import (
    CacheControl,
    Continue,
    RespondWith,
    ResponseCacheInterceptor,
    output_cache_route,
)
from output_cache.keys import cache_key_for, derive_cache_key, derive_strict_cache_key
from output_cache.protocols import DistributedCache
from output_cache.repositories import RedisDistributedCache

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Keys
    "derive_cache_key",
    "derive_strict_cache_key",
    "cache_key_for",
    # Interceptor
    "ResponseCacheInterceptor",
    "Continue",
    "RespondWith",
    "CacheControl",
    "output_cache_route",
    # Protocols (interfaces)
    "DistributedCache",
    # Repositories (data access)
    "RedisDistributedCache",
    # Entities (domain models)
    "CacheEntry",
    # DTOs (persisted contract)
    "CachedResponsePayload",
    "serialize_entry",
    "deserialize_entry",
]
