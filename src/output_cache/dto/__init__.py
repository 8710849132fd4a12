"""Data Transfer Objects for persisted and API contracts.

These Pydantic models define external contracts: the JSON layout of a cached
response and the payloads of the demo API.

Internal logic should use entities from the entities package.
"""

from .cached_response import CachedResponsePayload, deserialize_entry, serialize_entry
from .responses import HealthCheckResponse, StoredValueResponse

__all__ = [
    "CachedResponsePayload",
    "serialize_entry",
    "deserialize_entry",
    "HealthCheckResponse",
    "StoredValueResponse",
]
