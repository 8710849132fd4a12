"""Cache key derivation.

Keys come from the request path only: surrounding slashes are trimmed and the
remaining ones become the delimiter, so ``/Values/123/`` maps to
``Values:123``. Query strings are ignored by default, which means
``/values?page=1`` and ``/values?page=2`` share a key. The strict variant
appends the sorted query string for routes that need it.
"""

from urllib.parse import parse_qsl, urlencode

from starlette.requests import Request

DEFAULT_DELIMITER = ":"


def derive_cache_key(path: str, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Derive a cache key from a request path.

    Args:
        path: The request path, e.g. ``/Values/123/``
        delimiter: Replacement for inner path separators

    Returns:
        The cache key, possibly empty for the root path
    """
    return path.strip("/").replace("/", delimiter)


def derive_strict_cache_key(
    path: str,
    query_string: str,
    delimiter: str = DEFAULT_DELIMITER,
) -> str:
    """Derive a cache key from the path plus the sorted query string.

    Args:
        path: The request path
        query_string: The raw query string, without the leading ``?``
        delimiter: Replacement for inner path separators

    Returns:
        ``derive_cache_key(path)`` when there is no query string, otherwise
        that key followed by ``?`` and the parameters sorted by name and value
    """
    key = derive_cache_key(path, delimiter)
    params = parse_qsl(query_string, keep_blank_values=True)
    if not params:
        return key
    return f"{key}?{urlencode(sorted(params))}"


def cache_key_for(request: Request, include_query_string: bool = False) -> str:
    """Derive the cache key for a Starlette request."""
    if include_query_string:
        return derive_strict_cache_key(request.url.path, request.url.query)
    return derive_cache_key(request.url.path)
