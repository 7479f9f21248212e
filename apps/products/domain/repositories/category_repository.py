"""
Category repository interface.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from uuid import UUID

from ..entities.category import Category


@dataclass(frozen=True)
class CategoryQuery:
    page: int = 1
    limit: int = 10
    parent_id: Optional[UUID] = None
    roots_only: bool = False
    is_active: Optional[bool] = None
    search: Optional[str] = None
    sort_by: str = 'created_at'
    sort_order: str = 'desc'


@dataclass
class CategoryDetails:
    """A category with its parent and direct children."""
    category: Category
    parent: Optional[Category] = None
    children: List[Category] = field(default_factory=list)


class CategoryRepository(ABC):
    """Abstract repository for Category."""

    @abstractmethod
    def find_by_id(self, category_id: UUID) -> Optional[Category]:
        """Find a category by ID."""
        pass

    @abstractmethod
    def find_by_slug(self, slug: str) -> Optional[Category]:
        """Find a category by slug."""
        pass

    @abstractmethod
    def find_by_id_with_relations(self, category_id: UUID) -> Optional[CategoryDetails]:
        pass

    @abstractmethod
    def find_by_slug_with_relations(self, slug: str) -> Optional[CategoryDetails]:
        pass

    @abstractmethod
    def find_many(self, query: CategoryQuery) -> Tuple[List[Category], int]:
        """Return one page of categories and the total number of matches."""
        pass

    @abstractmethod
    def find_all(self) -> List[Category]:
        """Return every category, used for tree checks."""
        pass

    @abstractmethod
    def create(self, category: Category) -> Category:
        pass

    @abstractmethod
    def update(self, category: Category) -> Category:
        pass

    @abstractmethod
    def delete(self, category_id: UUID) -> None:
        """Delete a category, moving its children to the root."""
        pass

    @abstractmethod
    def exists_by_slug(self, slug: str, exclude_id: Optional[UUID] = None) -> bool:
        pass
