"""
Cache port used by use cases.
"""
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional


class CacheService(ABC):
    """Key-value cache with per-entry time to live (seconds)."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None on a miss."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any, ttl: int = 60) -> None:
        """Store a value for ttl seconds."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Delete a key. Missing keys are ignored."""
        pass

    @abstractmethod
    def delete_multiple(self, keys: Iterable[str]) -> None:
        """Delete several keys at once."""
        pass
