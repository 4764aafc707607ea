"""
Unit tests for the Redis enrichment cache wrapper.

Uses a url nothing listens on, so every call exercises the failure path.
"""
import pytest

from precision_scout.app.services.redis import RedisService, enrichment_key

UNREACHABLE = "redis://127.0.0.1:1/0"


def test_enrichment_key():
    assert enrichment_key("clinicflow") == "enrichment:clinicflow"


@pytest.mark.asyncio
async def test_unreachable_redis_is_a_cache_miss():
    service = RedisService(UNREACHABLE)
    try:
        assert await service.get(enrichment_key("clinicflow")) is None
        assert await service.set(enrichment_key("clinicflow"), {"score": 80}, expire=60) is False
        assert await service.ping() is False
    finally:
        await service.close()


def test_cache_exposes_only_what_the_pipeline_uses():
    assert not hasattr(RedisService, "delete")
