"""FastAPI route class that applies the response cache interceptor."""

from collections.abc import Callable, Coroutine
from typing import Any

from fastapi.routing import APIRoute
from starlette.requests import Request
from starlette.responses import Response

from output_cache.api.dependencies import get_distributed_cache
from output_cache.protocols import DistributedCache

from .response_cache import ResponseCacheInterceptor


def output_cache_route(
    duration_in_seconds: int,
    include_query_string: bool = False,
    resolve_cache: Callable[[Request], DistributedCache] = get_distributed_cache,
) -> type[APIRoute]:
    """Build a route class that caches responses of every route using it.

    Args:
        duration_in_seconds: How long a response stays in the cache.
        include_query_string: Key on path plus sorted query string.
        resolve_cache: Looks up the distributed cache for a request. Called per
            request, after the application has started.

    Returns:
        An APIRoute subclass for ``APIRouter(route_class=...)``

    Example:
        ```python
        router = APIRouter(route_class=output_cache_route(60))

        @router.get("/values/{value_id}")
        async def get_value(value_id: int): ...
        ```
    """
    interceptor = ResponseCacheInterceptor(duration_in_seconds, include_query_string)

    class OutputCacheRoute(APIRoute):
        def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
            route_handler = super().get_route_handler()

            async def cached_route_handler(request: Request) -> Response:
                cache = resolve_cache(request)
                return await interceptor.run(request, cache, route_handler)

            return cached_route_handler

    return OutputCacheRoute
