"""
Redis Service Module

Provides async Redis client service for caching enrichment results.
Handles JSON serialization/deserialization and cache management.

Key Features:
- Async Redis operations
- JSON data handling
- Configurable expiration
- Failures logged and reported as cache misses
"""

from redis import asyncio as aioredis
from redis.exceptions import RedisError
from typing import Optional, Any
import json
from datetime import timedelta
from ..utils.config import settings
from ..utils.logger import redis_service_logger as logger

ENRICHMENT_KEY_PREFIX = "enrichment"


def enrichment_key(company_id: str) -> str:
    return f"{ENRICHMENT_KEY_PREFIX}:{company_id}"


class RedisService:
    """
    Async Redis service for caching and data management.
    Provides methods for getting and setting cached data.
    """

    def __init__(self, url: Optional[str] = None):
        """Initialize Redis connection pool (connections are opened lazily)."""
        self.redis = aioredis.from_url(
            url or settings.REDIS_URL,
            encoding="utf-8",
            decode_responses=True
        )

    async def get(self, key: str) -> Optional[Any]:
        """
        Get value from Redis cache.

        Returns:
            Deserialized value or None if not found or Redis is unavailable
        """
        try:
            data = await self.redis.get(key)
            if data:
                return json.loads(data)
            return None
        except (RedisError, OSError, json.JSONDecodeError) as e:
            logger.error(f"Redis get error: {str(e)}")
            return None

    async def set(self, key: str, value: Any, expire: int = 3600) -> bool:
        """
        Set value in Redis cache.

        Args:
            key: Cache key
            value: JSON-serialisable value
            expire: Cache expiration in seconds

        Returns:
            True if successful, False otherwise
        """
        try:
            await self.redis.setex(key, timedelta(seconds=expire), json.dumps(value))
            return True
        except (RedisError, OSError) as e:
            logger.error(f"Redis set error: {str(e)}")
            return False

    async def ping(self) -> bool:
        try:
            return bool(await self.redis.ping())
        except (RedisError, OSError) as e:
            logger.warning(f"Redis ping failed: {str(e)}")
            return False

    async def close(self) -> None:
        await self.redis.aclose()

# Create global Redis instance
redis_service = RedisService()
