"""Response cache interceptor and its FastAPI integration.

Usage:
    ```python
    from fastapi import APIRouter
    from output_cache.interceptors import output_cache_route

    router = APIRouter(route_class=output_cache_route(duration_in_seconds=60))
    ```
"""

from .cache_control import CacheControl, stamp_cache_control
from .response_cache import (
    Continue,
    PreStageResult,
    RespondWith,
    ResponseCacheInterceptor,
    build_response,
    capture_entry,
)
from .route import output_cache_route

__all__ = [
    "CacheControl",
    "stamp_cache_control",
    "Continue",
    "RespondWith",
    "PreStageResult",
    "ResponseCacheInterceptor",
    "build_response",
    "capture_entry",
    "output_cache_route",
]
