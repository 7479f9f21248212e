"""
List products use case.
"""
import logging
from dataclasses import dataclass

from shared.application import CacheService, UseCase, UseCaseResult
from shared.application.cache_keys import build_list_cache_key
from shared.application.pagination import total_pages
from ...domain.repositories.product_repository import ProductQuery, ProductRepository
from ..dtos.product_dto import GetProductsDTO, ProductDTO, ProductListDTO

logger = logging.getLogger(__name__)


@dataclass
class GetProductsUseCase(UseCase[GetProductsDTO, ProductListDTO]):
    """Paged product list, cached per distinct query."""

    product_repository: ProductRepository
    cache: CacheService
    ttl: int = 300

    def execute(self, input_dto: GetProductsDTO) -> UseCaseResult[ProductListDTO]:
        cache_key = build_list_cache_key(
            'product:list',
            page=input_dto.page,
            limit=input_dto.limit,
            status=input_dto.status,
            category_id=input_dto.category_id,
            brand_id=input_dto.brand_id,
            search=input_dto.search,
            sort_by=input_dto.sort_by,
            sort_order=input_dto.sort_order,
        )
        cached = self.cache.get(cache_key)
        if cached is not None:
            return UseCaseResult.ok(cached)

        products, total = self.product_repository.find_many(
            ProductQuery(
                page=input_dto.page,
                limit=input_dto.limit,
                status=input_dto.status,
                category_id=input_dto.category_id,
                brand_id=input_dto.brand_id,
                search=input_dto.search,
                sort_by=input_dto.sort_by,
                sort_order=input_dto.sort_order,
            )
        )
        result = ProductListDTO(
            products=[ProductDTO.from_entity(product) for product in products],
            total=total,
            page=input_dto.page,
            limit=input_dto.limit,
            total_pages=total_pages(total, input_dto.limit),
        )
        self.cache.set(cache_key, result, self.ttl)
        logger.debug(f"Product list cached under {cache_key}")
        return UseCaseResult.ok(result)
