"""
Product detail use cases (by id and by slug).
"""
from dataclasses import dataclass
from uuid import UUID

from shared.application import CacheService, NotFoundError, UseCase, UseCaseResult
from ...domain.repositories.product_repository import ProductRepository
from ..dtos.product_dto import ProductDetailDTO


def product_id_key(product_id) -> str:
    return f"product:id:{product_id}"


def product_slug_key(slug: str) -> str:
    return f"product:slug:{slug}"


@dataclass
class GetProductByIdUseCase(UseCase[UUID, ProductDetailDTO]):

    product_repository: ProductRepository
    cache: CacheService
    ttl: int = 300

    def execute(self, input_dto: UUID) -> UseCaseResult[ProductDetailDTO]:
        cache_key = product_id_key(input_dto)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return UseCaseResult.ok(cached)

        details = self.product_repository.find_by_id_with_details(input_dto)
        if details is None:
            raise NotFoundError("Product", str(input_dto))

        result = ProductDetailDTO.from_details(details)
        self.cache.set(cache_key, result, self.ttl)
        return UseCaseResult.ok(result)


@dataclass
class GetProductBySlugUseCase(UseCase[str, ProductDetailDTO]):

    product_repository: ProductRepository
    cache: CacheService
    ttl: int = 300

    def execute(self, input_dto: str) -> UseCaseResult[ProductDetailDTO]:
        cache_key = product_slug_key(input_dto)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return UseCaseResult.ok(cached)

        details = self.product_repository.find_by_slug_with_details(input_dto)
        if details is None:
            raise NotFoundError("Product", input_dto)

        result = ProductDetailDTO.from_details(details)
        self.cache.set(cache_key, result, self.ttl)
        return UseCaseResult.ok(result)
