"""
Django ORM implementation of CategoryRepository.
"""
from typing import List, Optional, Tuple
from uuid import UUID

from django.db import transaction
from django.db.models import Q

from ...domain.entities.category import Category
from ...domain.repositories.category_repository import CategoryDetails, CategoryQuery, CategoryRepository
from ...domain.value_objects.slug import Slug
from ..models.category_model import CategoryModel
from .ordering import order_by_clause

SORT_FIELDS = {'name', 'created_at', 'updated_at', 'sort_order'}


class DjangoCategoryRepository(CategoryRepository):
    """Django ORM based category repository implementation."""

    def find_by_id(self, category_id: UUID) -> Optional[Category]:
        """Find a category by ID."""
        try:
            model = CategoryModel.objects.get(id=category_id)
            return self.to_entity(model)
        except CategoryModel.DoesNotExist:
            return None

    def find_by_slug(self, slug: str) -> Optional[Category]:
        """Find a category by slug."""
        try:
            model = CategoryModel.objects.get(slug=slug)
            return self.to_entity(model)
        except CategoryModel.DoesNotExist:
            return None

    def find_by_id_with_relations(self, category_id: UUID) -> Optional[CategoryDetails]:
        return self._find_with_relations(id=category_id)

    def find_by_slug_with_relations(self, slug: str) -> Optional[CategoryDetails]:
        return self._find_with_relations(slug=slug)

    def find_many(self, query: CategoryQuery) -> Tuple[List[Category], int]:
        queryset = CategoryModel.objects.all()
        if query.roots_only:
            queryset = queryset.filter(parent__isnull=True)
        elif query.parent_id is not None:
            queryset = queryset.filter(parent_id=query.parent_id)
        if query.is_active is not None:
            queryset = queryset.filter(active=query.is_active)
        if query.search:
            queryset = queryset.filter(
                Q(name__icontains=query.search) | Q(description__icontains=query.search)
            )

        total = queryset.count()
        ordering = order_by_clause(query.sort_by, query.sort_order, SORT_FIELDS, 'created_at')
        offset = (query.page - 1) * query.limit
        models = queryset.order_by(ordering)[offset:offset + query.limit]
        return [self.to_entity(model) for model in models], total

    def find_all(self) -> List[Category]:
        return [self.to_entity(model) for model in CategoryModel.objects.all()]

    def create(self, category: Category) -> Category:
        model = CategoryModel.objects.create(id=category.id, **self._fields(category))
        return self.to_entity(model)

    def update(self, category: Category) -> Category:
        with transaction.atomic():
            CategoryModel.objects.filter(id=category.id).update(
                updated_at=category.updated_at,
                **self._fields(category),
            )
            return self.to_entity(CategoryModel.objects.get(id=category.id))

    def delete(self, category_id: UUID) -> None:
        """Delete a category; its children become root categories."""
        with transaction.atomic():
            CategoryModel.objects.filter(parent_id=category_id).update(parent=None)
            CategoryModel.objects.filter(id=category_id).delete()

    def exists_by_slug(self, slug: str, exclude_id: Optional[UUID] = None) -> bool:
        queryset = CategoryModel.objects.filter(slug=slug)
        if exclude_id:
            queryset = queryset.exclude(id=exclude_id)
        return queryset.exists()

    def _find_with_relations(self, **lookup) -> Optional[CategoryDetails]:
        try:
            model = (
                CategoryModel.objects
                .select_related('parent')
                .prefetch_related('children')
                .get(**lookup)
            )
        except CategoryModel.DoesNotExist:
            return None
        return CategoryDetails(
            category=self.to_entity(model),
            parent=self.to_entity(model.parent) if model.parent else None,
            children=[self.to_entity(child) for child in model.children.all()],
        )

    @staticmethod
    def _fields(category: Category) -> dict:
        return {
            'name': category.name,
            'slug': category.slug.value,
            'description': category.description,
            'image_url': category.image_url,
            'parent_id': category.parent_id,
            'sort_order': category.sort_order,
            'active': category.is_active,
        }

    @staticmethod
    def to_entity(model: CategoryModel) -> Category:
        """Convert Django model to domain entity."""
        return Category(
            id=model.id,
            name=model.name,
            slug=Slug(model.slug),
            description=model.description,
            image_url=model.image_url,
            parent_id=model.parent_id,
            sort_order=model.sort_order,
            is_active=model.active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
