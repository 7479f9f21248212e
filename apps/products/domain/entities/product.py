"""
Product entity (Aggregate Root) and its variants and images.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import UUID

from shared.domain import AggregateRoot, BaseEntity
from ..exceptions import ArchivedProductError
from ..value_objects.price import Price
from ..value_objects.product_status import ProductStatus
from ..value_objects.slug import Slug


@dataclass(kw_only=True)
class ProductVariant(BaseEntity):
    """A purchasable configuration of a product (size, colour, ...)."""
    product_id: UUID
    price: Price
    stock_quantity: int = 0
    sale_price: Optional[Price] = None
    sku: Optional[str] = None
    attributes: Optional[Dict[str, Any]] = None
    weight: Optional[Decimal] = None
    barcode: Optional[str] = None

    @property
    def effective_price(self) -> Price:
        """The price a shopper pays right now."""
        return self.sale_price if self.sale_price is not None else self.price


@dataclass(kw_only=True)
class ProductImage(BaseEntity):
    product_id: UUID
    url: str
    variant_id: Optional[UUID] = None
    alt_text: Optional[str] = None
    sort_order: Optional[int] = None


@dataclass(kw_only=True)
class Product(AggregateRoot):
    """Catalog product. Sellable only while PUBLISHED."""
    name: str
    slug: Slug
    description: Optional[str] = None
    brand_id: Optional[UUID] = None
    category_id: Optional[UUID] = None
    default_image: Optional[str] = None
    seo_meta_title: Optional[str] = None
    seo_meta_desc: Optional[str] = None
    status: ProductStatus = ProductStatus.DRAFT
    variants: List[ProductVariant] = field(default_factory=list)
    images: List[ProductImage] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        name: str,
        slug: str,
        description: Optional[str] = None,
        brand_id: Optional[UUID] = None,
        category_id: Optional[UUID] = None,
        default_image: Optional[str] = None,
        seo_meta_title: Optional[str] = None,
        seo_meta_desc: Optional[str] = None,
        status: ProductStatus = ProductStatus.DRAFT,
    ) -> 'Product':
        """Factory method to create a new product."""
        return cls(
            name=name,
            slug=Slug(slug),
            description=description,
            brand_id=brand_id,
            category_id=category_id,
            default_image=default_image,
            seo_meta_title=seo_meta_title,
            seo_meta_desc=seo_meta_desc,
            status=ProductStatus(status),
        )

    def publish(self) -> None:
        if self.status == ProductStatus.ARCHIVED:
            raise ArchivedProductError("publish")
        self.status = ProductStatus.PUBLISHED
        self.touch()

    def archive(self) -> None:
        self.status = ProductStatus.ARCHIVED
        self.touch()

    def draft(self) -> None:
        if self.status == ProductStatus.ARCHIVED:
            raise ArchivedProductError("draft")
        self.status = ProductStatus.DRAFT
        self.touch()

    def update_status(self, new_status: ProductStatus) -> None:
        """Archived products must go back through DRAFT before publishing."""
        new_status = ProductStatus(new_status)
        if self.status == ProductStatus.ARCHIVED and new_status == ProductStatus.PUBLISHED:
            raise ArchivedProductError("publish")
        self.status = new_status
        self.touch()

    def update_slug(self, new_slug: str) -> None:
        self.slug = Slug(new_slug)
        self.touch()

    @property
    def is_available(self) -> bool:
        return self.status == ProductStatus.PUBLISHED

    @property
    def first_variant(self) -> Optional[ProductVariant]:
        return self.variants[0] if self.variants else None
