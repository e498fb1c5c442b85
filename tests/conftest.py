"""Shared fixtures: a relay wired to a mocked async Redis client."""

from unittest.mock import AsyncMock

import pytest

from relay import RoomRelay


def _make_mock_redis():
    """Create a mock redis.asyncio client with the commands the relay uses."""
    client = AsyncMock()
    client.publish = AsyncMock(return_value=1)
    client.smembers = AsyncMock(return_value=set())
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def mock_redis():
    return _make_mock_redis()


@pytest.fixture
def relay(mock_redis):
    return RoomRelay("redis://localhost:6379", "test-token", prefix="io", redis_client=mock_redis)
