"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - The distributed cache is created once in the lifespan
    - Dependency functions retrieve it from request.app.state per request
    - The output cache route resolves it the same way at invocation time,
      since routes are built before the lifespan runs
"""

from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from output_cache.config import get_redis_client, settings
from output_cache.handlers import ValuesHandler
from output_cache.protocols import DistributedCache
from output_cache.repositories import RedisDistributedCache


def get_distributed_cache(request: Request) -> DistributedCache:
    """Dependency injection for the distributed cache from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The DistributedCache instance from app.state

    Raises:
        RuntimeError: If the cache is not initialized
    """
    cache = getattr(request.app.state, "distributed_cache", None)
    if cache is None:
        raise RuntimeError("DistributedCache not initialized. Check lifespan setup.")
    return cache


def get_values_handler(request: Request) -> ValuesHandler:
    """Dependency injection for ValuesHandler, bound to the app's cache.

    Args:
        request: FastAPI Request object

    Returns:
        A ValuesHandler using the distributed cache from app.state
    """
    return ValuesHandler(cache=get_distributed_cache(request))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Creates the Redis client and distributed cache, stores the cache in
    app.state and closes the client on shutdown.

    Args:
        app: The FastAPI application instance

    Yields:
        None
    """
    repository = RedisDistributedCache(
        redis_client=get_redis_client(),
        instance_name=settings.redis_instance_name,
    )
    app.state.distributed_cache = repository

    print("✓ Distributed cache initialized")
    print(f"✓ Redis: {settings.redis_url} (prefix {repository.prefix!r})")
    print(f"✓ Output cache duration: {settings.cache_duration_seconds}s")

    yield

    del app.state.distributed_cache
    await repository.close()
    print("✓ Distributed cache shut down")


# Type aliases for cleaner dependency injection
CacheDep = Annotated[DistributedCache, Depends(get_distributed_cache)]
ValuesHandlerDep = Annotated[ValuesHandler, Depends(get_values_handler)]
