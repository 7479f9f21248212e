"""
Product repository interface.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple
from uuid import UUID

from ..entities.brand import Brand
from ..entities.category import Category
from ..entities.product import Product
from ..value_objects.product_status import ProductStatus


@dataclass(frozen=True)
class ProductQuery:
    """Filters, ordering and page window for product lists."""
    page: int = 1
    limit: int = 10
    status: Optional[ProductStatus] = None
    category_id: Optional[UUID] = None
    brand_id: Optional[UUID] = None
    search: Optional[str] = None
    sort_by: str = 'created_at'
    sort_order: str = 'desc'


@dataclass
class ProductDetails:
    """A product with its variants, images, brand and category loaded."""
    product: Product
    brand: Optional[Brand] = None
    category: Optional[Category] = None


class ProductRepository(ABC):
    """Abstract repository for Product aggregate."""

    @abstractmethod
    def find_by_id(self, product_id: UUID) -> Optional[Product]:
        """Find a product by ID."""
        pass

    @abstractmethod
    def find_by_slug(self, slug: str) -> Optional[Product]:
        """Find a product by slug."""
        pass

    @abstractmethod
    def find_many(self, query: ProductQuery, with_variants: bool = False) -> Tuple[List[Product], int]:
        """Return one page of products and the total number of matches."""
        pass

    @abstractmethod
    def find_by_id_with_details(self, product_id: UUID) -> Optional[ProductDetails]:
        """Find a product by ID together with its relations."""
        pass

    @abstractmethod
    def find_by_slug_with_details(self, slug: str) -> Optional[ProductDetails]:
        """Find a product by slug together with its relations."""
        pass

    @abstractmethod
    def create(self, product: Product) -> Product:
        """Persist a new product with its variants and images in one transaction."""
        pass

    @abstractmethod
    def update(self, product: Product) -> Product:
        """Persist changes to a product's own fields."""
        pass

    @abstractmethod
    def delete(self, product_id: UUID) -> None:
        """Delete a product and everything it owns."""
        pass

    @abstractmethod
    def exists_by_slug(self, slug: str, exclude_id: Optional[UUID] = None) -> bool:
        """Check whether another product already uses the slug."""
        pass
