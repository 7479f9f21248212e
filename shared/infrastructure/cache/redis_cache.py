"""
Redis cache implementation.
"""
import logging
from typing import Any, Iterable, Optional

from django.core.cache import cache

from shared.application.cache import CacheService

logger = logging.getLogger(__name__)


class RedisCache(CacheService):
    """
    Cache backed by Django's cache framework (django-redis in production).

    Values are pickled by the cache backend, so DTO dataclasses are stored
    as-is and come back as the same types.
    """

    def __init__(self, prefix: str = ""):
        self.prefix = prefix

    def _make_key(self, key: str) -> str:
        """Create a cache key with prefix."""
        if self.prefix:
            return f"{self.prefix}:{key}"
        return key

    def get(self, key: str) -> Optional[Any]:
        value = cache.get(self._make_key(key))
        logger.debug(f"Cache {'hit' if value is not None else 'miss'}: {key}")
        return value

    def set(self, key: str, value: Any, ttl: int = 60) -> None:
        cache.set(self._make_key(key), value, ttl)

    def delete(self, key: str) -> None:
        cache.delete(self._make_key(key))

    def delete_multiple(self, keys: Iterable[str]) -> None:
        keys = [self._make_key(key) for key in keys]
        if keys:
            cache.delete_many(keys)
