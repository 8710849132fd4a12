"""Wire form of a cached response."""

from pydantic import BaseModel, ConfigDict, Field

from output_cache.entities import CacheEntry


class CachedResponsePayload(BaseModel):
    """Serialized snapshot of a response as stored in the distributed cache.

    Field aliases define the persisted layout: ``content``, ``contentType``,
    ``statusCode``, ``headers`` and ``contentEncoding``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    content: str = Field(..., description="The response body as text")
    content_type: str | None = Field(None, alias="contentType", description="Media type")
    status_code: int = Field(..., alias="statusCode", description="HTTP status code")
    headers: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Header name to ordered values",
    )
    content_encoding: str | None = Field(
        None,
        alias="contentEncoding",
        description="First Content-Encoding token",
    )

    @classmethod
    def from_entity(cls, entry: CacheEntry) -> "CachedResponsePayload":
        """Build the wire form from a domain entry."""
        return cls(
            content=entry.content,
            content_type=entry.content_type,
            status_code=entry.status_code,
            headers={name: list(values) for name, values in entry.headers.items()},
            content_encoding=entry.content_encoding,
        )

    def to_entity(self) -> CacheEntry:
        """Convert the wire form back to a domain entry."""
        return CacheEntry(
            content=self.content,
            content_type=self.content_type,
            status_code=self.status_code,
            headers={name: list(values) for name, values in self.headers.items()},
            content_encoding=self.content_encoding,
        )


def serialize_entry(entry: CacheEntry) -> str:
    """Serialize a cache entry to its JSON wire form.

    Args:
        entry: The entry to serialize

    Returns:
        JSON text using the persisted field names
    """
    return CachedResponsePayload.from_entity(entry).model_dump_json(by_alias=True)


def deserialize_entry(payload: str) -> CacheEntry:
    """Parse a JSON payload back into a cache entry.

    Args:
        payload: JSON text previously produced by ``serialize_entry``

    Returns:
        The reconstructed entry

    Raises:
        pydantic.ValidationError: If the payload is not a valid cached response
    """
    return CachedResponsePayload.model_validate_json(payload).to_entity()
