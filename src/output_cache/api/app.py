from typing import Annotated, Any

from fastapi import APIRouter, Body, FastAPI, status

from output_cache.api.dependencies import ValuesHandlerDep, lifespan
from output_cache.config import settings
from output_cache.dto import HealthCheckResponse, StoredValueResponse
from output_cache.interceptors import output_cache_route

app = FastAPI(
    title="Output Cache API",
    description="HTTP response caching backed by a distributed Redis cache",
    version="0.1.0",
    lifespan=lifespan,
)

values_router = APIRouter(prefix="/values", tags=["values"])
cached_values_router = APIRouter(
    prefix="/values",
    tags=["values"],
    route_class=output_cache_route(settings.cache_duration_seconds),
)


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Output Cache API",
        "version": "0.1.0",
        "description": "HTTP response caching backed by a distributed Redis cache",
        "endpoints": {
            "values": "/values",
            "cached_value": "/values/{value_id}",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: ValuesHandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check()


@values_router.get("", response_model=StoredValueResponse)
async def get_value(handler: ValuesHandlerDep) -> StoredValueResponse:
    """Read the value stored under the demo key."""
    return await handler.get_value()


@values_router.post("", status_code=status.HTTP_200_OK)
async def post_value(
    value: Annotated[str, Body(..., description="The value to store")],
    handler: ValuesHandlerDep,
) -> None:
    """Store a value under the demo key for one minute."""
    await handler.set_value(value)


@cached_values_router.get("/{value_id}")
async def get_cached_value(value_id: int, handler: ValuesHandlerDep) -> dict[str, Any]:
    """Describe a value; responses are output-cached."""
    return await handler.describe_value(value_id)


app.include_router(values_router)
app.include_router(cached_values_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "output_cache.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
