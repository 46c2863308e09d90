"""
Redis caching utilities for read-mostly data (FAQ, geocoding lookups)
Every operation degrades to a cache miss when Redis is unavailable
"""
import json
import logging
from functools import wraps
from typing import Any, Callable, Optional

from . import config
from .rate_limiter import get_redis_client

logger = logging.getLogger(__name__)

FAQ_CACHE_KEY = "faq:all"


class Cache:
    """Redis cache wrapper with JSON serialization"""

    def __init__(self):
        self.redis_client = None

    def _get_client(self):
        """Lazy load Redis client"""
        if not config.REDIS_ENABLED:
            return None
        if self.redis_client is None:
            try:
                self.redis_client = get_redis_client()
            except Exception as e:
                logger.warning(f"⚠️ Redis cache unavailable: {e}")
                return None
        return self.redis_client

    def get(self, key: str) -> Optional[Any]:
        client = self._get_client()
        if not client:
            return None

        try:
            value = client.get(key)
            if value:
                logger.debug(f"✅ Cache HIT: {key}")
                return json.loads(value)
            logger.debug(f"❌ Cache MISS: {key}")
            return None
        except Exception as e:
            logger.error(f"❌ Cache get error for {key}: {e}")
            return None

    def set(self, key: str, value: Any, ttl: int = 3600) -> bool:
        """Set value in cache with TTL (default 1 hour)"""
        client = self._get_client()
        if not client:
            return False

        try:
            client.setex(key, ttl, json.dumps(value))
            logger.debug(f"✅ Cache SET: {key} (TTL: {ttl}s)")
            return True
        except Exception as e:
            logger.error(f"❌ Cache set error for {key}: {e}")
            return False

    def delete(self, key: str) -> bool:
        client = self._get_client()
        if not client:
            return False

        try:
            client.delete(key)
            logger.debug(f"✅ Cache DELETE: {key}")
            return True
        except Exception as e:
            logger.error(f"❌ Cache delete error for {key}: {e}")
            return False


# Global cache instance
cache = Cache()


def cached(key_prefix: str, ttl: int = 3600, key_builder: Optional[Callable] = None):
    """
    Decorator caching the awaited result of an async function

    Args:
        key_prefix: Prefix for cache key (e.g., 'geocode')
        ttl: Time to live in seconds (default 1 hour)
        key_builder: Optional function to build cache key from function args

    Example:
        @cached(key_prefix='geocode', ttl=3600)
        async def geocode(address: str):
            ...
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            if key_builder:
                cache_key = key_builder(*args, **kwargs)
            else:
                arg_str = str(args[0]).strip().lower() if args else "default"
                cache_key = f"{key_prefix}:{arg_str}"

            cached_value = cache.get(cache_key)
            if cached_value is not None:
                return cached_value

            result = await func(*args, **kwargs)
            if result is not None:
                cache.set(cache_key, result, ttl)

            return result

        return wrapper

    return decorator


def get_faq_cached() -> Optional[list]:
    return cache.get(FAQ_CACHE_KEY)


def set_faq_cached(items: list, ttl: int = config.FAQ_CACHE_SECONDS) -> bool:
    """FAQ changes only through seeding, 10 minute TTL"""
    return cache.set(FAQ_CACHE_KEY, items, ttl)


def invalidate_faq_cache() -> bool:
    return cache.delete(FAQ_CACHE_KEY)
