"""
Django ORM implementation of ProductRepository.
"""
from decimal import Decimal
from typing import List, Optional, Tuple
from uuid import UUID

from django.db import transaction
from django.db.models import Q

from ...domain.entities.product import Product, ProductImage, ProductVariant
from ...domain.repositories.product_repository import ProductDetails, ProductQuery, ProductRepository
from ...domain.value_objects.price import Price
from ...domain.value_objects.product_status import ProductStatus
from ...domain.value_objects.slug import Slug
from ..models.product_model import ProductImageModel, ProductModel, ProductVariantModel
from .django_brand_repository import DjangoBrandRepository
from .django_category_repository import DjangoCategoryRepository
from .ordering import order_by_clause

SORT_FIELDS = {'name', 'created_at', 'updated_at'}


class DjangoProductRepository(ProductRepository):
    """Django ORM based product repository implementation."""

    def find_by_id(self, product_id: UUID) -> Optional[Product]:
        """Find a product by ID."""
        try:
            model = ProductModel.objects.get(id=product_id)
            return self._to_entity(model)
        except ProductModel.DoesNotExist:
            return None

    def find_by_slug(self, slug: str) -> Optional[Product]:
        """Find a product by slug."""
        try:
            model = ProductModel.objects.get(slug=slug)
            return self._to_entity(model)
        except ProductModel.DoesNotExist:
            return None

    def find_many(self, query: ProductQuery, with_variants: bool = False) -> Tuple[List[Product], int]:
        queryset = ProductModel.objects.all()
        if query.status:
            queryset = queryset.filter(status=ProductStatus(query.status).value)
        if query.category_id:
            queryset = queryset.filter(category_id=query.category_id)
        if query.brand_id:
            queryset = queryset.filter(brand_id=query.brand_id)
        if query.search:
            queryset = queryset.filter(
                Q(name__icontains=query.search) | Q(description__icontains=query.search)
            )

        total = queryset.count()
        if with_variants:
            queryset = queryset.prefetch_related('variants')

        offset = (query.page - 1) * query.limit
        ordering = order_by_clause(query.sort_by, query.sort_order, SORT_FIELDS, 'created_at')
        models = queryset.order_by(ordering)[offset:offset + query.limit]
        return [self._to_entity(model, with_variants=with_variants) for model in models], total

    def find_by_id_with_details(self, product_id: UUID) -> Optional[ProductDetails]:
        return self._find_with_details(id=product_id)

    def find_by_slug_with_details(self, slug: str) -> Optional[ProductDetails]:
        return self._find_with_details(slug=slug)

    def create(self, product: Product) -> Product:
        """Insert the product, then its variants, then its images."""
        with transaction.atomic():
            model = ProductModel.objects.create(id=product.id, **self._fields(product))
            for variant in product.variants:
                ProductVariantModel.objects.create(
                    id=variant.id,
                    product=model,
                    sku=variant.sku,
                    attributes=variant.attributes,
                    price=variant.price.amount,
                    sale_price=variant.sale_price.amount if variant.sale_price else None,
                    stock_quantity=variant.stock_quantity,
                    weight=variant.weight,
                    barcode=variant.barcode,
                )
            for image in product.images:
                ProductImageModel.objects.create(
                    id=image.id,
                    product=model,
                    variant_id=image.variant_id,
                    url=image.url,
                    alt_text=image.alt_text,
                    sort_order=image.sort_order,
                )
            return self._to_entity(model)

    def update(self, product: Product) -> Product:
        with transaction.atomic():
            ProductModel.objects.filter(id=product.id).update(
                updated_at=product.updated_at,
                **self._fields(product),
            )
            return self._to_entity(ProductModel.objects.get(id=product.id))

    def delete(self, product_id: UUID) -> None:
        ProductModel.objects.filter(id=product_id).delete()

    def exists_by_slug(self, slug: str, exclude_id: Optional[UUID] = None) -> bool:
        queryset = ProductModel.objects.filter(slug=slug)
        if exclude_id:
            queryset = queryset.exclude(id=exclude_id)
        return queryset.exists()

    def _find_with_details(self, **lookup) -> Optional[ProductDetails]:
        try:
            model = (
                ProductModel.objects
                .select_related('brand', 'category')
                .prefetch_related('variants', 'images')
                .get(**lookup)
            )
        except ProductModel.DoesNotExist:
            return None
        return ProductDetails(
            product=self._to_entity(model, with_variants=True, with_images=True),
            brand=DjangoBrandRepository.to_entity(model.brand) if model.brand else None,
            category=DjangoCategoryRepository.to_entity(model.category) if model.category else None,
        )

    @staticmethod
    def _fields(product: Product) -> dict:
        return {
            'name': product.name,
            'slug': product.slug.value,
            'description': product.description,
            'brand_id': product.brand_id,
            'category_id': product.category_id,
            'default_image': product.default_image,
            'seo_meta_title': product.seo_meta_title,
            'seo_meta_desc': product.seo_meta_desc,
            'status': ProductStatus(product.status).value,
        }

    @staticmethod
    def variant_to_entity(model: ProductVariantModel) -> ProductVariant:
        return ProductVariant(
            id=model.id,
            product_id=model.product_id,
            sku=model.sku,
            attributes=model.attributes,
            price=Price(Decimal(str(model.price))),
            sale_price=Price(Decimal(str(model.sale_price))) if model.sale_price is not None else None,
            stock_quantity=model.stock_quantity,
            weight=model.weight,
            barcode=model.barcode,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_entity(self, model: ProductModel, with_variants: bool = False, with_images: bool = False) -> Product:
        """Convert Django model to domain entity."""
        return Product(
            id=model.id,
            name=model.name,
            slug=Slug(model.slug),
            description=model.description,
            brand_id=model.brand_id,
            category_id=model.category_id,
            default_image=model.default_image,
            seo_meta_title=model.seo_meta_title,
            seo_meta_desc=model.seo_meta_desc,
            status=ProductStatus(model.status),
            variants=[self.variant_to_entity(v) for v in model.variants.all()] if with_variants else [],
            images=[
                ProductImage(
                    id=image.id,
                    product_id=image.product_id,
                    variant_id=image.variant_id,
                    url=image.url,
                    alt_text=image.alt_text,
                    sort_order=image.sort_order,
                    created_at=image.created_at,
                )
                for image in model.images.all()
            ] if with_images else [],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
