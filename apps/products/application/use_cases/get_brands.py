"""
List brands use case.
"""
from dataclasses import dataclass

from shared.application import CacheService, UseCase, UseCaseResult
from shared.application.cache_keys import build_list_cache_key
from shared.application.pagination import total_pages
from ...domain.repositories.brand_repository import BrandQuery, BrandRepository
from ..dtos.brand_dto import BrandDTO, BrandListDTO, GetBrandsDTO


@dataclass
class GetBrandsUseCase(UseCase[GetBrandsDTO, BrandListDTO]):
    """Paged brand list. Active brands sorted by name unless asked otherwise."""

    brand_repository: BrandRepository
    cache: CacheService
    ttl: int = 600

    def execute(self, input_dto: GetBrandsDTO) -> UseCaseResult[BrandListDTO]:
        cache_key = build_list_cache_key(
            'brand:list',
            page=input_dto.page,
            limit=input_dto.limit,
            active=input_dto.is_active,
            sort_by=input_dto.sort_by,
            sort_order=input_dto.sort_order,
            search=input_dto.search,
        )
        cached = self.cache.get(cache_key)
        if cached is not None:
            return UseCaseResult.ok(cached)

        brands, total = self.brand_repository.find_many(
            BrandQuery(
                page=input_dto.page,
                limit=input_dto.limit,
                is_active=input_dto.is_active,
                search=input_dto.search,
                sort_by=input_dto.sort_by,
                sort_order=input_dto.sort_order,
            )
        )
        result = BrandListDTO(
            brands=[BrandDTO.from_entity(brand) for brand in brands],
            total=total,
            page=input_dto.page,
            limit=input_dto.limit,
            total_pages=total_pages(total, input_dto.limit),
        )
        self.cache.set(cache_key, result, self.ttl)
        return UseCaseResult.ok(result)
