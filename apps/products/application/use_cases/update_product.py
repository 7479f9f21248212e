"""
Update product use case.
"""
import logging
from dataclasses import dataclass

from shared.application import ApplicationError, CacheService, NotFoundError, UseCase, UseCaseResult
from ...domain.repositories.product_repository import ProductRepository
from ..dtos.product_dto import ProductDetailDTO, ProductUpdateDTO
from .get_product import product_id_key, product_slug_key

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    'name',
    'description',
    'brand_id',
    'category_id',
    'default_image',
    'seo_meta_title',
    'seo_meta_desc',
)


@dataclass
class UpdateProductUseCase(UseCase[ProductUpdateDTO, ProductDetailDTO]):

    product_repository: ProductRepository
    cache: CacheService

    def execute(self, input_dto: ProductUpdateDTO) -> UseCaseResult[ProductDetailDTO]:
        product = self.product_repository.find_by_id(input_dto.product_id)
        if product is None:
            raise NotFoundError("Product", str(input_dto.product_id))

        changes = input_dto.changes
        old_slug = product.slug.value
        new_slug = changes.get('slug')
        if new_slug and new_slug != old_slug:
            if self.product_repository.exists_by_slug(new_slug, exclude_id=product.id):
                raise ApplicationError("Product with this slug already exists", "SLUG_EXISTS", 409)
            product.update_slug(new_slug)

        if 'status' in changes:
            product.update_status(changes['status'])
        for name in UPDATABLE_FIELDS:
            if name in changes:
                setattr(product, name, changes[name])
        product.touch()

        self.product_repository.update(product)

        keys = {product_id_key(product.id), product_slug_key(old_slug), product_slug_key(product.slug.value)}
        self.cache.delete_multiple(sorted(keys))
        logger.info(f"Updated product {product.id}")

        details = self.product_repository.find_by_id_with_details(product.id)
        return UseCaseResult.ok(ProductDetailDTO.from_details(details))
