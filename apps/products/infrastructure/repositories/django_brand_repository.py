"""
Django ORM implementation of BrandRepository.
"""
from typing import List, Tuple

from django.db.models import Q

from ...domain.entities.brand import Brand
from ...domain.repositories.brand_repository import BrandQuery, BrandRepository
from ...domain.value_objects.slug import Slug
from ..models.brand_model import BrandModel
from .ordering import order_by_clause

SORT_FIELDS = {'name', 'created_at', 'updated_at'}


class DjangoBrandRepository(BrandRepository):
    """Django ORM based brand repository implementation."""

    def find_many(self, query: BrandQuery) -> Tuple[List[Brand], int]:
        queryset = BrandModel.objects.all()
        if query.is_active is not None:
            queryset = queryset.filter(active=query.is_active)
        if query.search:
            queryset = queryset.filter(
                Q(name__icontains=query.search) | Q(description__icontains=query.search)
            )

        total = queryset.count()
        ordering = order_by_clause(query.sort_by, query.sort_order, SORT_FIELDS, 'name')
        offset = (query.page - 1) * query.limit
        models = queryset.order_by(ordering)[offset:offset + query.limit]
        return [self.to_entity(model) for model in models], total

    @staticmethod
    def to_entity(model: BrandModel) -> Brand:
        """Convert Django model to domain entity."""
        return Brand(
            id=model.id,
            name=model.name,
            slug=Slug(model.slug),
            description=model.description,
            logo_url=model.logo_url,
            is_active=model.active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
