"""HTTP handlers for the demo value endpoints.

Handlers talk to the distributed cache directly and translate backend
failures into HTTP errors.
"""

import time

from fastapi import HTTPException, status
from redis.exceptions import RedisError

from output_cache.dto import HealthCheckResponse, StoredValueResponse
from output_cache.protocols import DistributedCache

VALUE_KEY = "my-key"
VALUE_TTL_SECONDS = 60


class ValuesHandler:
    """HTTP handlers for reading and writing a single demo value.

    Example:
        ```python
        handler = ValuesHandler(cache=RedisDistributedCache.create())

        @app.get("/values", response_model=StoredValueResponse)
        async def get_value():
            return await handler.get_value()
        ```
    """

    def __init__(self, cache: DistributedCache) -> None:
        """Initialize the values handler.

        Args:
            cache: The distributed cache holding the value (required).
        """
        self._cache = cache

    async def get_value(self) -> StoredValueResponse:
        """Handle GET /values requests.

        Raises:
            HTTPException: If the cache backend fails
        """
        try:
            value = await self._cache.get(VALUE_KEY)
        except RedisError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to read value: {e}",
            ) from e

        return StoredValueResponse(key=VALUE_KEY, value=value)

    async def set_value(self, value: str) -> None:
        """Handle POST /values requests.

        Args:
            value: The value to store for one minute

        Raises:
            HTTPException: If the cache backend fails
        """
        try:
            await self._cache.set(VALUE_KEY, value, VALUE_TTL_SECONDS)
        except RedisError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to store value: {e}",
            ) from e

    async def describe_value(self, value_id: int) -> dict:
        """Handle GET /values/{value_id} requests.

        The response carries a generation timestamp, which makes cache hits
        easy to spot.
        """
        return {"id": value_id, "generated_at": time.time()}

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Raises:
            HTTPException: 503 if the cache backend is unreachable
        """
        check = getattr(self._cache, "health_check", None)
        is_healthy = bool(await check()) if check is not None else True

        if not is_healthy:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Distributed cache is unreachable",
            )

        return HealthCheckResponse(status="healthy", cache_healthy=True)
