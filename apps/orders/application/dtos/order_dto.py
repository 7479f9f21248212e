"""
Order DTOs.
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import List
from uuid import UUID

from ...domain.entities.order import Order
from ...domain.entities.order_item import OrderItem


@dataclass
class OrderItemDTO:
    id: UUID
    variant_id: UUID
    quantity: int
    unit_price: Decimal
    subtotal: Decimal

    @classmethod
    def from_entity(cls, item: OrderItem) -> 'OrderItemDTO':
        return cls(
            id=item.id,
            variant_id=item.variant_id,
            quantity=item.quantity,
            unit_price=item.unit_price,
            subtotal=item.subtotal,
        )


@dataclass
class OrderDTO:
    id: UUID
    user_id: str
    status: str
    items: List[OrderItemDTO]
    total_amount: Decimal
    item_count: int
    created_at: datetime

    @classmethod
    def from_entity(cls, order: Order) -> 'OrderDTO':
        return cls(
            id=order.id,
            user_id=order.user_id,
            status=order.status.value,
            items=[OrderItemDTO.from_entity(item) for item in order.items],
            total_amount=order.total_amount,
            item_count=order.item_count,
            created_at=order.created_at,
        )


@dataclass
class GetOrderDTO:
    user_id: str
    order_id: UUID
