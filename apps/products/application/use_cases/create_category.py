"""
Create category use case.
"""
import logging
from dataclasses import dataclass

from shared.application import ApplicationError, UseCase, UseCaseResult
from ...domain.entities.category import Category
from ...domain.repositories.category_repository import CategoryRepository
from ..dtos.category_dto import CategoryCreateDTO, CategoryDetailDTO

logger = logging.getLogger(__name__)


@dataclass
class CreateCategoryUseCase(UseCase[CategoryCreateDTO, CategoryDetailDTO]):

    category_repository: CategoryRepository

    def execute(self, input_dto: CategoryCreateDTO) -> UseCaseResult[CategoryDetailDTO]:
        if self.category_repository.exists_by_slug(input_dto.slug):
            raise ApplicationError("Category with this slug already exists", "SLUG_EXISTS", 409)

        if input_dto.parent_id is not None and self.category_repository.find_by_id(input_dto.parent_id) is None:
            raise ApplicationError("Parent category not found", "PARENT_NOT_FOUND", 404)

        category = Category.create(
            name=input_dto.name,
            slug=input_dto.slug,
            description=input_dto.description,
            image_url=input_dto.image_url,
            parent_id=input_dto.parent_id,
            sort_order=input_dto.sort_order,
            is_active=input_dto.is_active,
        )
        self.category_repository.create(category)
        logger.info(f"Created category: {category.name} ({category.id})")

        details = self.category_repository.find_by_id_with_relations(category.id)
        return UseCaseResult.ok(CategoryDetailDTO.from_details(details))
