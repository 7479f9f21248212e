"""
Create product use case.
"""
import logging
from dataclasses import dataclass

from shared.application import ApplicationError, UseCase, UseCaseResult
from ...domain.entities.product import Product, ProductImage, ProductVariant
from ...domain.repositories.product_repository import ProductRepository
from ...domain.value_objects.price import Price
from ..dtos.product_dto import ProductCreateDTO, ProductDetailDTO

logger = logging.getLogger(__name__)


@dataclass
class CreateProductUseCase(UseCase[ProductCreateDTO, ProductDetailDTO]):
    """Create a product together with its variants and images."""

    product_repository: ProductRepository

    def execute(self, input_dto: ProductCreateDTO) -> UseCaseResult[ProductDetailDTO]:
        if self.product_repository.exists_by_slug(input_dto.slug):
            raise ApplicationError("Product with this slug already exists", "SLUG_EXISTS", 409)

        product = Product.create(
            name=input_dto.name,
            slug=input_dto.slug,
            description=input_dto.description,
            brand_id=input_dto.brand_id,
            category_id=input_dto.category_id,
            default_image=input_dto.default_image,
            seo_meta_title=input_dto.seo_meta_title,
            seo_meta_desc=input_dto.seo_meta_desc,
            status=input_dto.status,
        )
        product.variants = [
            ProductVariant(
                product_id=product.id,
                sku=variant.sku,
                attributes=variant.attributes,
                price=Price(variant.price),
                sale_price=Price(variant.sale_price) if variant.sale_price is not None else None,
                stock_quantity=variant.stock_quantity,
                weight=variant.weight,
                barcode=variant.barcode,
            )
            for variant in input_dto.variants
        ]
        product.images = [
            ProductImage(
                product_id=product.id,
                url=image.url,
                alt_text=image.alt_text,
                sort_order=image.sort_order,
                variant_id=image.variant_id,
            )
            for image in input_dto.images
        ]

        self.product_repository.create(product)
        logger.info(f"Created product: {product.name} ({product.id})")

        details = self.product_repository.find_by_id_with_details(product.id)
        return UseCaseResult.ok(ProductDetailDTO.from_details(details))
