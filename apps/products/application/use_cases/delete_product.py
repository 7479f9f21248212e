"""
Delete product use case.
"""
import logging
from dataclasses import dataclass
from uuid import UUID

from shared.application import CacheService, NotFoundError, UseCase, UseCaseResult
from ...domain.repositories.product_repository import ProductRepository
from .get_product import product_id_key, product_slug_key

logger = logging.getLogger(__name__)


@dataclass
class DeleteProductUseCase(UseCase[UUID, None]):
    """
    Delete a product and drop its detail cache entries.

    A missing product raises NotFoundError before any delete is issued.
    List caches are left to expire on their own TTL.
    """

    product_repository: ProductRepository
    cache: CacheService

    def execute(self, input_dto: UUID) -> UseCaseResult[None]:
        product = self.product_repository.find_by_id(input_dto)
        if product is None:
            raise NotFoundError("Product", str(input_dto))

        self.product_repository.delete(product.id)
        self.cache.delete(product_id_key(product.id))
        self.cache.delete(product_slug_key(product.slug.value))
        logger.info(f"Deleted product {product.id}")
        return UseCaseResult.ok()
