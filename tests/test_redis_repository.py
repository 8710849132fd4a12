"""
Tests for the Redis distributed cache.
"""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from output_cache.config import Settings, get_redis_client
from output_cache.protocols import DistributedCache
from output_cache.repositories import RedisDistributedCache


@pytest.fixture
def client():
    """Mock async Redis client."""
    return AsyncMock()


def test_satisfies_protocol(client):
    """Test the repository matches the DistributedCache protocol."""
    assert isinstance(RedisDistributedCache(client, instance_name=""), DistributedCache)


@pytest.mark.asyncio
async def test_set_uses_relative_expiration(client):
    """Test writes use SET with EX seconds and the instance prefix."""
    cache = RedisDistributedCache(client, instance_name="app")

    await cache.set("values:1", "payload", 60)

    client.set.assert_awaited_once_with("app:values:1", "payload", ex=60)


@pytest.mark.asyncio
async def test_get_without_prefix(client):
    """Test reads go to the bare key when no instance name is set."""
    client.get.return_value = "payload"
    cache = RedisDistributedCache(client, instance_name="")

    assert await cache.get("values:1") == "payload"
    client.get.assert_awaited_once_with("values:1")


@pytest.mark.asyncio
async def test_get_decodes_bytes(client):
    """Test byte replies are decoded as UTF-8."""
    client.get.return_value = "héllo".encode()
    cache = RedisDistributedCache(client, instance_name="")

    assert await cache.get("k") == "héllo"


@pytest.mark.asyncio
async def test_get_missing(client):
    """Test missing keys read as None."""
    client.get.return_value = None
    cache = RedisDistributedCache(client, instance_name="")

    assert await cache.get("k") is None


@pytest.mark.asyncio
async def test_health_check(client):
    """Test health check maps PING failures to False."""
    cache = RedisDistributedCache(client, instance_name="")

    client.ping.return_value = True
    assert await cache.health_check() is True

    client.ping.side_effect = RedisConnectionError("down")
    assert await cache.health_check() is False


@pytest.mark.asyncio
async def test_close(client):
    """Test close releases the client."""
    await RedisDistributedCache(client, instance_name="").close()
    client.aclose.assert_awaited_once()


def test_settings_validation():
    """Test invalid settings are rejected."""
    with pytest.raises(ValueError):
        Settings(cache_duration_seconds=0)
    with pytest.raises(ValueError):
        Settings(redis_port=0)
    with pytest.raises(ValueError):
        Settings(redis_ssl_cert_reqs="sometimes")


def test_redis_url_scheme():
    """Test TLS switches the URL scheme."""
    assert Settings(redis_host="cache", redis_port=6380).redis_url == "redis://cache:6380"
    assert Settings(redis_use_ssl=True).redis_url.startswith("rediss://")


def test_get_redis_client_with_tls():
    """Test a TLS client can be built without connecting."""
    config = Settings(redis_use_ssl=True, redis_ssl_cert_reqs="none")
    client = get_redis_client(config)

    assert client.connection_pool.connection_kwargs["ssl_cert_reqs"] == "none"
