"""
Brand repository interface.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..entities.brand import Brand


@dataclass(frozen=True)
class BrandQuery:
    page: int = 1
    limit: int = 50
    is_active: Optional[bool] = True
    search: Optional[str] = None
    sort_by: str = 'name'
    sort_order: str = 'asc'


class BrandRepository(ABC):
    """Abstract repository for Brand."""

    @abstractmethod
    def find_many(self, query: BrandQuery) -> Tuple[List[Brand], int]:
        """Return one page of brands and the total number of matches."""
        pass
