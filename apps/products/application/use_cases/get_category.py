"""
Category detail use cases (by id and by slug).
"""
from dataclasses import dataclass
from uuid import UUID

from shared.application import CacheService, NotFoundError, UseCase, UseCaseResult
from ...domain.repositories.category_repository import CategoryRepository
from ..dtos.category_dto import CategoryDetailDTO


def category_id_key(category_id) -> str:
    return f"category:detail:id:{category_id}"


def category_slug_key(slug: str) -> str:
    return f"category:detail:slug:{slug}"


@dataclass
class GetCategoryByIdUseCase(UseCase[UUID, CategoryDetailDTO]):
    """Category with parent and children, cached by id."""

    category_repository: CategoryRepository
    cache: CacheService
    ttl: int = 300

    def execute(self, input_dto: UUID) -> UseCaseResult[CategoryDetailDTO]:
        cache_key = category_id_key(input_dto)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return UseCaseResult.ok(cached)

        details = self.category_repository.find_by_id_with_relations(input_dto)
        if details is None:
            raise NotFoundError("Category", str(input_dto))

        result = CategoryDetailDTO.from_details(details)
        self.cache.set(cache_key, result, self.ttl)
        return UseCaseResult.ok(result)


@dataclass
class GetCategoryBySlugUseCase(UseCase[str, CategoryDetailDTO]):
    """Category with parent and children, cached by slug."""

    category_repository: CategoryRepository
    cache: CacheService
    ttl: int = 300

    def execute(self, input_dto: str) -> UseCaseResult[CategoryDetailDTO]:
        cache_key = category_slug_key(input_dto)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return UseCaseResult.ok(cached)

        details = self.category_repository.find_by_slug_with_relations(input_dto)
        if details is None:
            raise NotFoundError("Category", input_dto)

        result = CategoryDetailDTO.from_details(details)
        self.cache.set(cache_key, result, self.ttl)
        return UseCaseResult.ok(result)
