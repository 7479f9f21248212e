"""
Brand DTOs.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from ...domain.entities.brand import Brand


@dataclass
class GetBrandsDTO:
    page: int = 1
    limit: int = 50
    is_active: Optional[bool] = True
    search: Optional[str] = None
    sort_by: str = 'name'
    sort_order: str = 'asc'


@dataclass
class BrandDTO:
    id: UUID
    name: str
    slug: str
    description: Optional[str]
    logo_url: Optional[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, brand: Brand) -> 'BrandDTO':
        return cls(
            id=brand.id,
            name=brand.name,
            slug=brand.slug.value,
            description=brand.description,
            logo_url=brand.logo_url,
            is_active=brand.is_active,
            created_at=brand.created_at,
            updated_at=brand.updated_at,
        )


@dataclass
class BrandListDTO:
    brands: List[BrandDTO]
    total: int
    page: int
    limit: int
    total_pages: int
