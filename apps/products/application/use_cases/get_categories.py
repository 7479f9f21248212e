"""
List categories use case.
"""
from dataclasses import dataclass

from shared.application import CacheService, UseCase, UseCaseResult
from shared.application.cache_keys import build_list_cache_key
from shared.application.pagination import total_pages
from ...domain.repositories.category_repository import CategoryQuery, CategoryRepository
from ..dtos.category_dto import CategoryDTO, CategoryListDTO, GetCategoriesDTO


@dataclass
class GetCategoriesUseCase(UseCase[GetCategoriesDTO, CategoryListDTO]):

    category_repository: CategoryRepository
    cache: CacheService
    ttl: int = 300

    def execute(self, input_dto: GetCategoriesDTO) -> UseCaseResult[CategoryListDTO]:
        cache_key = build_list_cache_key(
            'category:list',
            page=input_dto.page,
            limit=input_dto.limit,
            parent_id='null' if input_dto.roots_only else input_dto.parent_id,
            active=input_dto.is_active,
            search=input_dto.search,
            sort_by=input_dto.sort_by,
            sort_order=input_dto.sort_order,
        )
        cached = self.cache.get(cache_key)
        if cached is not None:
            return UseCaseResult.ok(cached)

        categories, total = self.category_repository.find_many(
            CategoryQuery(
                page=input_dto.page,
                limit=input_dto.limit,
                parent_id=input_dto.parent_id,
                roots_only=input_dto.roots_only,
                is_active=input_dto.is_active,
                search=input_dto.search,
                sort_by=input_dto.sort_by,
                sort_order=input_dto.sort_order,
            )
        )
        result = CategoryListDTO(
            categories=[CategoryDTO.from_entity(category) for category in categories],
            total=total,
            page=input_dto.page,
            limit=input_dto.limit,
            total_pages=total_pages(total, input_dto.limit),
        )
        self.cache.set(cache_key, result, self.ttl)
        return UseCaseResult.ok(result)
