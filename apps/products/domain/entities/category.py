"""
Category entity.
"""
from dataclasses import dataclass
from typing import Iterable, Optional
from uuid import UUID

from shared.domain import AggregateRoot
from ..value_objects.slug import Slug


@dataclass(kw_only=True)
class Category(AggregateRoot):
    """Category entity for organizing products into a tree."""
    name: str
    slug: Slug
    description: Optional[str] = None
    image_url: Optional[str] = None
    parent_id: Optional[UUID] = None
    sort_order: Optional[int] = None
    is_active: bool = True

    @classmethod
    def create(
        cls,
        name: str,
        slug: str,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
        parent_id: Optional[UUID] = None,
        sort_order: Optional[int] = None,
        is_active: bool = True,
    ) -> 'Category':
        """Factory method to create a new category."""
        return cls(
            name=name,
            slug=Slug(slug),
            description=description,
            image_url=image_url,
            parent_id=parent_id,
            sort_order=sort_order,
            is_active=is_active,
        )

    def update_slug(self, new_slug: str) -> None:
        self.slug = Slug(new_slug)
        self.touch()

    def deactivate(self) -> None:
        """Deactivate the category."""
        self.is_active = False
        self.touch()

    def activate(self) -> None:
        """Activate the category."""
        self.is_active = True
        self.touch()

    def can_be_parent_of(self, category_id: UUID) -> bool:
        return self.id != category_id

    def is_descendant_of(self, category_id: UUID, all_categories: Iterable['Category']) -> bool:
        """Walk up the parent chain looking for category_id."""
        by_id = {category.id: category for category in all_categories}
        seen = set()
        current = self
        while current.parent_id is not None and current.id not in seen:
            if current.parent_id == category_id:
                return True
            seen.add(current.id)
            current = by_id.get(current.parent_id)
            if current is None:
                return False
        return False
