"""
Product DTOs.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import UUID

from ...domain.entities.product import Product, ProductImage, ProductVariant
from ...domain.repositories.product_repository import ProductDetails


@dataclass
class GetProductsDTO:
    """DTO for product list queries. Defaults match the public list endpoint."""
    page: int = 1
    limit: int = 10
    status: Optional[str] = None
    category_id: Optional[UUID] = None
    brand_id: Optional[UUID] = None
    search: Optional[str] = None
    sort_by: str = 'created_at'
    sort_order: str = 'desc'


@dataclass
class VariantInputDTO:
    price: Decimal
    stock_quantity: int
    sale_price: Optional[Decimal] = None
    sku: Optional[str] = None
    attributes: Optional[Dict[str, Any]] = None
    weight: Optional[Decimal] = None
    barcode: Optional[str] = None


@dataclass
class ImageInputDTO:
    url: str
    alt_text: Optional[str] = None
    sort_order: Optional[int] = None
    variant_id: Optional[UUID] = None


@dataclass
class ProductCreateDTO:
    """DTO for creating a product."""
    name: str
    slug: str
    description: Optional[str] = None
    brand_id: Optional[UUID] = None
    category_id: Optional[UUID] = None
    default_image: Optional[str] = None
    seo_meta_title: Optional[str] = None
    seo_meta_desc: Optional[str] = None
    status: str = 'DRAFT'
    variants: List[VariantInputDTO] = field(default_factory=list)
    images: List[ImageInputDTO] = field(default_factory=list)


@dataclass
class ProductUpdateDTO:
    """DTO for updating a product. Only keys present in changes are applied."""
    product_id: UUID
    changes: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ProductDTO:
    """DTO for product output."""
    id: UUID
    name: str
    slug: str
    description: Optional[str]
    brand_id: Optional[UUID]
    category_id: Optional[UUID]
    default_image: Optional[str]
    seo_meta_title: Optional[str]
    seo_meta_desc: Optional[str]
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> 'ProductDTO':
        """Create DTO from entity."""
        return cls(**cls._fields(product))

    @staticmethod
    def _fields(product: Product) -> dict:
        return {
            'id': product.id,
            'name': product.name,
            'slug': product.slug.value,
            'description': product.description,
            'brand_id': product.brand_id,
            'category_id': product.category_id,
            'default_image': product.default_image,
            'seo_meta_title': product.seo_meta_title,
            'seo_meta_desc': product.seo_meta_desc,
            'status': product.status.value,
            'created_at': product.created_at,
            'updated_at': product.updated_at,
        }


@dataclass
class RelationSummaryDTO:
    id: UUID
    name: str
    slug: str


@dataclass
class ProductImageDTO:
    id: UUID
    product_id: UUID
    variant_id: Optional[UUID]
    url: str
    alt_text: Optional[str]
    sort_order: Optional[int]

    @classmethod
    def from_entity(cls, image: ProductImage) -> 'ProductImageDTO':
        return cls(
            id=image.id,
            product_id=image.product_id,
            variant_id=image.variant_id,
            url=image.url,
            alt_text=image.alt_text,
            sort_order=image.sort_order,
        )


@dataclass
class ProductVariantDTO:
    id: UUID
    product_id: UUID
    sku: Optional[str]
    attributes: Optional[Dict[str, Any]]
    price: Decimal
    sale_price: Optional[Decimal]
    stock_quantity: int
    weight: Optional[Decimal]
    barcode: Optional[str]
    images: List[ProductImageDTO] = field(default_factory=list)

    @classmethod
    def from_entity(cls, variant: ProductVariant, images: List[ProductImage]) -> 'ProductVariantDTO':
        return cls(
            id=variant.id,
            product_id=variant.product_id,
            sku=variant.sku,
            attributes=variant.attributes,
            price=variant.price.amount,
            sale_price=variant.sale_price.amount if variant.sale_price else None,
            stock_quantity=variant.stock_quantity,
            weight=variant.weight,
            barcode=variant.barcode,
            images=[ProductImageDTO.from_entity(image) for image in images if image.variant_id == variant.id],
        )


@dataclass
class ProductDetailDTO(ProductDTO):
    """Product with brand, category, variants and images."""
    brand: Optional[RelationSummaryDTO] = None
    category: Optional[RelationSummaryDTO] = None
    variants: List[ProductVariantDTO] = field(default_factory=list)
    images: List[ProductImageDTO] = field(default_factory=list)

    @classmethod
    def from_details(cls, details: ProductDetails) -> 'ProductDetailDTO':
        product = details.product
        return cls(
            **cls._fields(product),
            brand=RelationSummaryDTO(
                id=details.brand.id, name=details.brand.name, slug=details.brand.slug.value,
            ) if details.brand else None,
            category=RelationSummaryDTO(
                id=details.category.id, name=details.category.name, slug=details.category.slug.value,
            ) if details.category else None,
            variants=[ProductVariantDTO.from_entity(v, product.images) for v in product.variants],
            images=[ProductImageDTO.from_entity(image) for image in product.images],
        )


@dataclass
class ProductSearchItemDTO(ProductDTO):
    """Product row for search results, priced from its first variant."""
    price: Decimal = Decimal('0')
    sale_price: Optional[Decimal] = None
    variant_count: int = 0

    @classmethod
    def from_entity(cls, product: Product) -> 'ProductSearchItemDTO':
        first = product.first_variant
        return cls(
            **cls._fields(product),
            price=first.price.amount if first else Decimal('0'),
            sale_price=first.sale_price.amount if first and first.sale_price else None,
            variant_count=len(product.variants),
        )


@dataclass
class ProductListDTO:
    """Paged product list."""
    products: List[ProductDTO]
    total: int
    page: int
    limit: int
    total_pages: int
