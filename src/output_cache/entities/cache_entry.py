"""Cache entry domain entity."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CacheEntry:
    """Snapshot of an HTTP response, stored so a later hit can rebuild it.

    Attributes:
        content: The fully materialized response body as text
        content_type: Media type without parameters, if the response had one
        status_code: The literal status code captured at write time
        headers: Header name to ordered values, content headers excluded
        content_encoding: The first Content-Encoding token, if any
    """

    content: str
    content_type: str | None
    status_code: int
    headers: dict[str, list[str]] = field(default_factory=dict)
    content_encoding: str | None = None
