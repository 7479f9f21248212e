"""
Category DTOs.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from ...domain.entities.category import Category
from ...domain.repositories.category_repository import CategoryDetails


@dataclass
class GetCategoriesDTO:
    page: int = 1
    limit: int = 10
    parent_id: Optional[UUID] = None
    roots_only: bool = False
    is_active: Optional[bool] = None
    search: Optional[str] = None
    sort_by: str = 'created_at'
    sort_order: str = 'desc'


@dataclass
class CategoryCreateDTO:
    """DTO for category creation."""
    name: str
    slug: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    parent_id: Optional[UUID] = None
    sort_order: Optional[int] = None
    is_active: bool = True


@dataclass
class CategoryUpdateDTO:
    """DTO for category update. Only keys present in changes are applied."""
    category_id: UUID
    changes: Dict[str, Any] = field(default_factory=dict)


@dataclass
class CategoryDTO:
    """DTO for category output."""
    id: UUID
    name: str
    slug: str
    description: Optional[str]
    image_url: Optional[str]
    parent_id: Optional[UUID]
    sort_order: Optional[int]
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, category: Category) -> 'CategoryDTO':
        """Create DTO from entity."""
        return cls(
            id=category.id,
            name=category.name,
            slug=category.slug.value,
            description=category.description,
            image_url=category.image_url,
            parent_id=category.parent_id,
            sort_order=category.sort_order,
            is_active=category.is_active,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )


@dataclass
class CategoryDetailDTO(CategoryDTO):
    """Category with its parent and direct children."""
    parent: Optional[CategoryDTO] = None
    children: List[CategoryDTO] = field(default_factory=list)

    @classmethod
    def from_details(cls, details: CategoryDetails) -> 'CategoryDetailDTO':
        base = CategoryDTO.from_entity(details.category)
        return cls(
            **base.__dict__,
            parent=CategoryDTO.from_entity(details.parent) if details.parent else None,
            children=[CategoryDTO.from_entity(child) for child in details.children],
        )


@dataclass
class CategoryListDTO:
    categories: List[CategoryDTO]
    total: int
    page: int
    limit: int
    total_pages: int
