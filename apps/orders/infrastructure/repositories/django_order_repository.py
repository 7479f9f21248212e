"""
Django ORM implementation of OrderRepository.
"""
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from django.db import transaction

from ...domain.entities.order import Order
from ...domain.entities.order_item import OrderItem
from ...domain.repositories.order_repository import OrderRepository
from ...domain.value_objects.order_status import OrderStatus
from ..models.order_model import OrderItemModel, OrderModel


class DjangoOrderRepository(OrderRepository):
    """Django ORM based order repository implementation."""

    def create_order(self, order: Order) -> Order:
        with transaction.atomic():
            model = OrderModel.objects.create(
                id=order.id,
                user_id=order.user_id,
                status=order.status.value,
                total_amount=order.total_amount,
            )
            OrderItemModel.objects.bulk_create([
                OrderItemModel(
                    id=item.id,
                    order=model,
                    variant_id=item.variant_id,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    subtotal=item.subtotal,
                )
                for item in order.items
            ])
        return self.get_order_with_items(model.id)

    def get_orders_by_user(self, user_id: str) -> List[Order]:
        models = OrderModel.objects.filter(user_id=user_id).prefetch_related('items').order_by('-created_at')
        return [self._to_entity(model) for model in models]

    def get_order_with_items(self, order_id: UUID) -> Optional[Order]:
        try:
            model = OrderModel.objects.prefetch_related('items').get(id=order_id)
            return self._to_entity(model)
        except OrderModel.DoesNotExist:
            return None

    def _to_entity(self, model: OrderModel) -> Order:
        """Convert Django model to domain entity."""
        return Order(
            id=model.id,
            user_id=model.user_id,
            status=OrderStatus(model.status),
            items=[
                OrderItem(
                    id=item.id,
                    order_id=model.id,
                    variant_id=item.variant_id,
                    quantity=item.quantity,
                    unit_price=Decimal(str(item.unit_price)),
                    created_at=item.created_at,
                )
                for item in model.items.all()
            ],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
