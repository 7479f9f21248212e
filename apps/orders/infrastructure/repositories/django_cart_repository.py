"""
Django ORM implementation of CartRepository.
"""
import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import IntegrityError, transaction
from django.db.models import F, Prefetch
from django.utils import timezone

from apps.products.infrastructure.models import ProductVariantModel
from ...domain.entities.cart import Cart
from ...domain.entities.cart_item import CartItem
from ...domain.repositories.cart_repository import (
    CartItemWithVariant,
    CartRepository,
    CartWithItems,
    VariantInfo,
)
from ..models.cart_model import CartItemModel, CartModel

logger = logging.getLogger(__name__)


class DjangoCartRepository(CartRepository):
    """Django ORM based cart repository implementation."""

    def find_by_id(self, cart_id: UUID) -> Optional[Cart]:
        """Find a cart by ID."""
        try:
            model = CartModel.objects.get(id=cart_id)
            return self._to_entity(model)
        except CartModel.DoesNotExist:
            return None

    def find_by_user_id(self, user_id: str) -> Optional[Cart]:
        """Find a cart by user ID."""
        try:
            model = CartModel.objects.get(user_id=user_id)
            return self._to_entity(model)
        except CartModel.DoesNotExist:
            return None

    def find_by_session_id(self, session_id: str) -> Optional[Cart]:
        """Find a guest cart by session ID."""
        try:
            model = CartModel.objects.get(session_id=session_id)
            return self._to_entity(model)
        except CartModel.DoesNotExist:
            return None

    def create_cart(self, user_id: Optional[str] = None, session_id: Optional[str] = None) -> Cart:
        cart = Cart.create(user_id=user_id, session_id=session_id)
        try:
            with transaction.atomic():
                model = CartModel.objects.create(id=cart.id, user_id=user_id, session_id=session_id)
        except IntegrityError:
            # Lost the race against a concurrent request creating the same cart
            existing = self.find_by_user_id(user_id) if user_id else self.find_by_session_id(session_id)
            if existing is None:
                raise
            logger.info(f"Cart already created concurrently, reusing {existing.id}")
            return existing
        return self._to_entity(model)

    def merge_guest_cart(self, user_id: str, session_id: str) -> Cart:
        with transaction.atomic():
            guest = CartModel.objects.select_for_update().filter(session_id=session_id).first()
            user_cart = CartModel.objects.select_for_update().filter(user_id=user_id).first()

            if guest is None or not guest.items.exists():
                if guest is not None:
                    guest.delete()
                    logger.info(f"Empty guest cart for session {session_id} discarded")
                if user_cart is None:
                    user_cart = CartModel.objects.create(user_id=user_id)
                return self._to_entity(user_cart)

            if user_cart is None:
                cart = self._to_entity(guest)
                cart.assign_to_user(user_id)
                guest.user_id = cart.user_id
                guest.session_id = cart.session_id
                guest.save(update_fields=['user_id', 'session_id', 'updated_at'])
                logger.info(f"Guest cart {guest.id} assigned to user {user_id}")
                return cart

            user_items = {item.variant_id: item for item in user_cart.items.select_for_update()}
            for guest_item in guest.items.all():
                target = user_items.get(guest_item.variant_id)
                if target is None:
                    CartItemModel.objects.create(
                        cart=user_cart,
                        variant_id=guest_item.variant_id,
                        quantity=guest_item.quantity,
                        price_at_add=guest_item.price_at_add,
                    )
                    continue
                target.quantity += guest_item.quantity
                target.price_at_add = min(target.price_at_add, guest_item.price_at_add)
                target.save(update_fields=['quantity', 'price_at_add', 'updated_at'])

            guest.delete()
            user_cart.save(update_fields=['updated_at'])
            logger.info(f"Guest cart for session {session_id} merged into cart {user_cart.id}")
            return self._to_entity(user_cart)

    def get_cart_with_items(
        self,
        cart_id: Optional[UUID] = None,
        user_id: Optional[str] = None,
        session_id: Optional[str] = None,
    ) -> Optional[CartWithItems]:
        if cart_id:
            lookup = {'id': cart_id}
        elif user_id:
            lookup = {'user_id': user_id}
        elif session_id:
            lookup = {'session_id': session_id}
        else:
            return None

        items = CartItemModel.objects.select_related('variant__product').order_by('created_at')
        try:
            model = CartModel.objects.prefetch_related(Prefetch('items', queryset=items)).get(**lookup)
        except CartModel.DoesNotExist:
            return None

        return CartWithItems(
            cart=self._to_entity(model),
            items=[
                CartItemWithVariant(item=self._item_to_entity(item), variant=self._variant_info(item.variant))
                for item in model.items.all()
            ],
        )

    def find_item(self, cart_id: UUID, variant_id: UUID) -> Optional[CartItem]:
        model = CartItemModel.objects.filter(cart_id=cart_id, variant_id=variant_id).first()
        return self._item_to_entity(model) if model is not None else None

    def add_or_update_item(self, cart_id: UUID, variant_id: UUID, quantity: int, price_snapshot: Decimal) -> CartItem:
        with transaction.atomic():
            item, created = CartItemModel.objects.select_for_update().get_or_create(
                cart_id=cart_id,
                variant_id=variant_id,
                defaults={'quantity': quantity, 'price_at_add': price_snapshot},
            )
            if not created:
                item.quantity = F('quantity') + quantity
                item.price_at_add = price_snapshot
                item.save(update_fields=['quantity', 'price_at_add', 'updated_at'])
                item.refresh_from_db()
            CartModel.objects.filter(id=cart_id).update(updated_at=timezone.now())
            return self._item_to_entity(item)

    def update_item_quantity(self, item_id: UUID, quantity: int) -> CartItem:
        item = CartItemModel.objects.get(id=item_id)
        item.quantity = quantity
        item.save(update_fields=['quantity', 'updated_at'])
        return self._item_to_entity(item)

    def remove_item(self, item_id: UUID) -> None:
        CartItemModel.objects.filter(id=item_id).delete()

    def clear_cart(self, cart_id: UUID) -> None:
        CartItemModel.objects.filter(cart_id=cart_id).delete()

    def delete_cart(self, cart_id: UUID) -> None:
        CartModel.objects.filter(id=cart_id).delete()

    def get_variant_info(self, variant_id: UUID) -> Optional[VariantInfo]:
        try:
            model = ProductVariantModel.objects.select_related('product').get(id=variant_id)
        except ProductVariantModel.DoesNotExist:
            return None
        return self._variant_info(model)

    def get_cart_item_with_variant(self, item_id: UUID) -> Optional[CartItemWithVariant]:
        try:
            item = CartItemModel.objects.select_related('variant__product').get(id=item_id)
        except CartItemModel.DoesNotExist:
            return None
        return CartItemWithVariant(item=self._item_to_entity(item), variant=self._variant_info(item.variant))

    @staticmethod
    def _variant_info(model: ProductVariantModel) -> VariantInfo:
        return VariantInfo(
            variant_id=model.id,
            product_id=model.product_id,
            stock_quantity=model.stock_quantity,
            price=Decimal(str(model.price)),
            sale_price=Decimal(str(model.sale_price)) if model.sale_price is not None else None,
            product_status=model.product.status,
        )

    @staticmethod
    def _item_to_entity(model: CartItemModel) -> CartItem:
        return CartItem(
            id=model.id,
            cart_id=model.cart_id,
            variant_id=model.variant_id,
            quantity=model.quantity,
            price_at_add=Decimal(str(model.price_at_add)),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_entity(self, model: CartModel) -> Cart:
        """Convert Django model to domain entity."""
        return Cart(
            id=model.id,
            user_id=model.user_id,
            session_id=model.session_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
