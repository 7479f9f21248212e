"""
Update category use case.
"""
import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from shared.application import ApplicationError, CacheService, UseCase, UseCaseResult
from ...domain.entities.category import Category
from ...domain.repositories.category_repository import CategoryRepository
from ..dtos.category_dto import CategoryDetailDTO, CategoryUpdateDTO
from .get_category import category_id_key, category_slug_key

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ('name', 'description', 'image_url', 'sort_order', 'is_active')


@dataclass
class UpdateCategoryUseCase(UseCase[CategoryUpdateDTO, CategoryDetailDTO]):
    """
    Update a category.

    Re-parenting is refused when the new parent is the category itself or one
    of its descendants, since either would put a cycle in the tree.
    """

    category_repository: CategoryRepository
    cache: CacheService

    def execute(self, input_dto: CategoryUpdateDTO) -> UseCaseResult[CategoryDetailDTO]:
        category = self.category_repository.find_by_id(input_dto.category_id)
        if category is None:
            raise ApplicationError("Category not found", "CATEGORY_NOT_FOUND", 404)

        changes = input_dto.changes
        old_slug = category.slug.value
        new_slug = changes.get('slug')
        if new_slug and new_slug != old_slug:
            if self.category_repository.exists_by_slug(new_slug, exclude_id=category.id):
                raise ApplicationError("Category with this slug already exists", "SLUG_EXISTS", 409)
            category.update_slug(new_slug)

        if 'parent_id' in changes:
            self._check_parent(category, changes['parent_id'])
            category.parent_id = changes['parent_id']

        for name in UPDATABLE_FIELDS:
            if name in changes:
                setattr(category, name, changes[name])
        category.touch()

        self.category_repository.update(category)
        self.cache.delete_multiple([
            category_id_key(category.id),
            category_slug_key(old_slug),
            category_slug_key(category.slug.value),
        ])
        logger.info(f"Updated category {category.id}")

        details = self.category_repository.find_by_id_with_relations(category.id)
        return UseCaseResult.ok(CategoryDetailDTO.from_details(details))

    def _check_parent(self, category: Category, parent_id: Optional[UUID]) -> None:
        if parent_id is None:
            return
        if not category.can_be_parent_of(parent_id):
            raise ApplicationError("Cannot set category as its own parent", "CIRCULAR_REFERENCE", 400)

        parent = self.category_repository.find_by_id(parent_id)
        if parent is None:
            raise ApplicationError("Parent category not found", "PARENT_NOT_FOUND", 404)

        if parent.is_descendant_of(category.id, self.category_repository.find_all()):
            raise ApplicationError(
                "Cannot set parent to a descendant category (circular reference)",
                "CIRCULAR_REFERENCE",
                400,
            )
