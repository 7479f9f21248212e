"""
Django ORM implementation of WishlistRepository.
"""
import logging
from decimal import Decimal
from typing import List
from uuid import UUID

from django.db import IntegrityError, transaction

from ...domain.entities.wishlist_item import WishlistItem
from ...domain.exceptions import DuplicateWishlistItemError
from ...domain.repositories.wishlist_repository import WishlistEntry, WishlistProduct, WishlistRepository
from ..models.wishlist_model import WishlistItemModel

logger = logging.getLogger(__name__)


def _decimal(value):
    return Decimal(str(value)) if value is not None else None


class DjangoWishlistRepository(WishlistRepository):
    """Django ORM based wishlist repository implementation."""

    def add_item(self, user_id: str, product_id: UUID) -> WishlistItem:
        item = WishlistItem.create(user_id=user_id, product_id=product_id)
        try:
            with transaction.atomic():
                model = WishlistItemModel.objects.create(
                    id=item.id,
                    user_id=user_id,
                    product_id=product_id,
                )
        except IntegrityError:
            raise DuplicateWishlistItemError(product_id)
        logger.info(f"User {user_id} added product {product_id} to wishlist")
        return self._to_entity(model)

    def remove_item(self, user_id: str, product_id: UUID) -> None:
        WishlistItemModel.objects.filter(user_id=user_id, product_id=product_id).delete()

    def get_user_wishlist(self, user_id: str) -> List[WishlistEntry]:
        models = (
            WishlistItemModel.objects
            .filter(user_id=user_id)
            .select_related('product')
            .prefetch_related('product__variants')
            .order_by('-created_at')
        )
        entries = []
        for model in models:
            product = model.product
            variant = next(iter(product.variants.all()), None)
            entries.append(WishlistEntry(
                item=self._to_entity(model),
                product=WishlistProduct(
                    id=product.id,
                    name=product.name,
                    slug=product.slug,
                    default_image=product.default_image,
                    price=_decimal(variant.price) if variant else None,
                    sale_price=_decimal(variant.sale_price) if variant else None,
                ),
            ))
        return entries

    def exists(self, user_id: str, product_id: UUID) -> bool:
        return WishlistItemModel.objects.filter(user_id=user_id, product_id=product_id).exists()

    def _to_entity(self, model: WishlistItemModel) -> WishlistItem:
        """Convert Django model to domain entity."""
        return WishlistItem(
            id=model.id,
            user_id=model.user_id,
            product_id=model.product_id,
            created_at=model.created_at,
            updated_at=model.created_at,
        )
