"""
Delete category use case.
"""
import logging
from dataclasses import dataclass
from uuid import UUID

from shared.application import ApplicationError, CacheService, UseCase, UseCaseResult
from ...domain.repositories.category_repository import CategoryRepository
from .get_category import category_id_key, category_slug_key

logger = logging.getLogger(__name__)


@dataclass
class DeleteCategoryUseCase(UseCase[UUID, None]):
    """Delete a category; its children are moved to the root."""

    category_repository: CategoryRepository
    cache: CacheService

    def execute(self, input_dto: UUID) -> UseCaseResult[None]:
        category = self.category_repository.find_by_id(input_dto)
        if category is None:
            raise ApplicationError("Category not found", "CATEGORY_NOT_FOUND", 404)

        self.category_repository.delete(category.id)
        self.cache.delete_multiple([
            category_id_key(category.id),
            category_slug_key(category.slug.value),
        ])
        logger.info(f"Deleted category {category.id}")
        return UseCaseResult.ok()
