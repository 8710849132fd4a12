"""Response cache interceptor.

Runs around a request handler in two stages:

    before(): request no-cache -> Continue
              cached entry     -> RespondWith(fabricated response)
              otherwise        -> Continue
    after():  request no-store -> stamp no-store, no write
              2xx response     -> write entry with the configured TTL, stamp public
              otherwise        -> no write

The interceptor keeps no state between requests. The distributed cache is
passed to every stage by the caller, and the key is derived again in each
stage from the request.
"""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import dataclass

from pydantic import ValidationError
from starlette.requests import Request
from starlette.responses import Response

from output_cache.dto import deserialize_entry, serialize_entry
from output_cache.entities import CacheEntry
from output_cache.keys import cache_key_for
from output_cache.protocols import DistributedCache

from .cache_control import NO_CACHE, NO_STORE, PUBLIC, CacheControl, stamp_cache_control

logger = logging.getLogger(__name__)

# Carried in dedicated CacheEntry fields or recomputed from the body.
CONTENT_HEADERS = frozenset({"content-type", "content-length", "content-encoding"})


@dataclass(frozen=True)
class Continue:
    """Pre-stage outcome: run the wrapped handler."""


@dataclass(frozen=True)
class RespondWith:
    """Pre-stage outcome: skip the handler and return this response."""

    response: Response


PreStageResult = Continue | RespondWith

CallNext = Callable[[Request], Awaitable[Response]]


class ResponseCacheInterceptor:
    """Caches successful responses in a distributed cache.

    Example:
        ```python
        interceptor = ResponseCacheInterceptor(duration_in_seconds=60)

        response = await interceptor.run(request, cache, handler)
        ```
    """

    def __init__(self, duration_in_seconds: int, include_query_string: bool = False) -> None:
        """Initialize the interceptor.

        Args:
            duration_in_seconds: How long a response stays in the cache.
            include_query_string: Key on path plus sorted query string instead
                of the path alone.
        """
        if isinstance(duration_in_seconds, bool) or not isinstance(duration_in_seconds, int):
            raise TypeError("duration_in_seconds must be an int")
        if duration_in_seconds <= 0:
            raise ValueError(f"duration_in_seconds must be positive, got {duration_in_seconds}")
        self._duration = duration_in_seconds
        self._include_query_string = include_query_string

    @property
    def duration_in_seconds(self) -> int:
        return self._duration

    def cache_key(self, request: Request) -> str:
        return cache_key_for(request, self._include_query_string)

    async def before(self, request: Request, cache: DistributedCache) -> PreStageResult:
        """Look up a cached response for the request.

        Args:
            request: The inbound request
            cache: The distributed cache to read from

        Returns:
            RespondWith carrying the rebuilt response on a hit, Continue otherwise
        """
        if CacheControl.from_request(request).no_cache:
            return Continue()

        key = self.cache_key(request)
        payload = await cache.get(key)
        if not payload:
            logger.debug("Output cache miss for key %r", key)
            return Continue()

        try:
            entry = deserialize_entry(payload)
        except ValidationError as e:
            logger.warning("Ignoring malformed output cache entry for key %r: %s", key, e)
            return Continue()

        logger.debug("Output cache hit for key %r", key)
        return RespondWith(build_response(entry))

    async def after(
        self,
        request: Request,
        response: Response | None,
        cache: DistributedCache,
    ) -> Response | None:
        """Stamp cache directives on the response and store it if eligible.

        Args:
            request: The inbound request
            response: The response produced by the handler
            cache: The distributed cache to write to

        Returns:
            The response to send, which may carry a replayed body

        Raises:
            ValueError: If a successful response body is not UTF-8 text
        """
        cache_control = CacheControl.from_request(request)

        if cache_control.no_cache and response is not None:
            stamp_cache_control(response, NO_CACHE)

        if cache_control.no_store:
            if response is not None:
                stamp_cache_control(response, NO_STORE)
            return response

        if response is None or not 200 <= response.status_code < 300:
            return response

        key = self.cache_key(request)
        entry = await capture_entry(response)
        await cache.set(key, serialize_entry(entry), self._duration)
        logger.debug("Stored output cache entry for key %r (ttl=%ss)", key, self._duration)

        stamp_cache_control(response, PUBLIC)
        return response

    async def run(self, request: Request, cache: DistributedCache, call_next: CallNext) -> Response:
        """Run the full pipeline around a handler.

        Args:
            request: The inbound request
            cache: The distributed cache for this request
            call_next: The wrapped handler

        Returns:
            The cached response on a hit, the handler's response otherwise
        """
        outcome = await self.before(request, cache)
        if isinstance(outcome, RespondWith):
            return outcome.response

        response = await call_next(request)
        return await self.after(request, response, cache)


def build_response(entry: CacheEntry) -> Response:
    """Rebuild a response from a cache entry.

    Stored headers are appended as-is without validation; entries are only
    ever written by this interceptor.
    """
    response = Response(
        content=entry.content,
        status_code=entry.status_code,
        media_type=entry.content_type,
    )
    for name, values in entry.headers.items():
        for value in values:
            response.headers.append(name, value)
    if entry.content_encoding:
        response.headers["content-encoding"] = entry.content_encoding
    return response


async def capture_entry(response: Response) -> CacheEntry:
    """Snapshot a response into a cache entry, draining its body.

    Raises:
        ValueError: If the body cannot be read as UTF-8 text
    """
    body = await read_body(response)
    try:
        content = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ValueError("Response body is not UTF-8 text and cannot be cached") from e

    headers: dict[str, list[str]] = {}
    for name, value in response.headers.items():
        if name.lower() in CONTENT_HEADERS:
            continue
        headers.setdefault(name, []).append(value)

    content_type = response.headers.get("content-type")
    if content_type is not None:
        content_type = content_type.split(";", 1)[0].strip() or None

    content_encoding = None
    encodings = response.headers.getlist("content-encoding")
    if encodings:
        content_encoding = encodings[0].split(",", 1)[0].strip() or None

    return CacheEntry(
        content=content,
        content_type=content_type,
        status_code=response.status_code,
        headers=headers,
        content_encoding=content_encoding,
    )


async def read_body(response: Response) -> bytes:
    """Read the full body of a response.

    Streaming bodies are consumed and replaced with a replay of the same
    bytes, so the response can still be sent afterwards.

    Raises:
        ValueError: If the response exposes neither a body nor a body iterator
    """
    body_iterator = getattr(response, "body_iterator", None)
    if body_iterator is not None:
        charset = getattr(response, "charset", "utf-8")
        chunks = []
        async for chunk in body_iterator:
            if isinstance(chunk, str):
                chunk = chunk.encode(charset)
            chunks.append(bytes(chunk))
        body = b"".join(chunks)
        response.body_iterator = _replay(body)
        return body

    body = getattr(response, "body", None)
    if body is None:
        raise ValueError(f"{type(response).__name__} has no readable body and cannot be cached")
    return bytes(body)


async def _replay(body: bytes) -> AsyncIterator[bytes]:
    yield body
