"""Shared fixtures for output cache tests."""

import asyncio

import pytest
from starlette.requests import Request


class FakeClock:
    """Manually advanced clock, in seconds."""

    def __init__(self, now: float = 1_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeDistributedCache:
    """In-memory DistributedCache with expiry driven by a FakeClock."""

    def __init__(self, clock: FakeClock | None = None) -> None:
        self.clock = clock or FakeClock()
        self.entries: dict[str, tuple[str, float]] = {}
        self.get_calls: list[str] = []
        self.set_calls: list[tuple[str, str, int]] = []

    async def get(self, key: str) -> str | None:
        self.get_calls.append(key)
        await asyncio.sleep(0)
        stored = self.entries.get(key)
        if stored is None:
            return None
        value, expires_at = stored
        if self.clock() >= expires_at:
            del self.entries[key]
            return None
        return value

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        self.set_calls.append((key, value, ttl_seconds))
        await asyncio.sleep(0)
        self.entries[key] = (value, self.clock() + ttl_seconds)

    def put(self, key: str, value: str, ttl_seconds: int = 60) -> None:
        self.entries[key] = (value, self.clock() + ttl_seconds)


def make_request(
    path: str = "/values/1",
    headers: dict[str, str] | None = None,
    query_string: str = "",
    method: str = "GET",
) -> Request:
    """Build a bare Starlette request for interceptor tests."""
    scope = {
        "type": "http",
        "http_version": "1.1",
        "method": method,
        "scheme": "http",
        "server": ("testserver", 80),
        "path": path,
        "raw_path": path.encode(),
        "root_path": "",
        "query_string": query_string.encode(),
        "headers": [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in (headers or {}).items()
        ],
    }
    return Request(scope)


@pytest.fixture
def clock():
    """Create a fake clock."""
    return FakeClock()


@pytest.fixture
def cache(clock):
    """Create an in-memory distributed cache."""
    return FakeDistributedCache(clock)
