"""
Order entity (Aggregate Root).
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from shared.domain import AggregateRoot
from ..value_objects.order_status import OrderStatus
from .order_item import OrderItem


@dataclass(kw_only=True)
class Order(AggregateRoot):
    """Order placed from a user's cart."""
    user_id: str
    items: List[OrderItem] = field(default_factory=list)
    status: OrderStatus = OrderStatus.PENDING

    @classmethod
    def create(cls, user_id: str, items: List[OrderItem]) -> 'Order':
        """Factory method to create a new order."""
        order = cls(user_id=user_id)
        for item in items:
            item.order_id = order.id
        order.items = items
        return order

    @property
    def total_amount(self) -> Decimal:
        """Calculate the total order amount."""
        return sum((item.subtotal for item in self.items), Decimal('0'))

    @property
    def item_count(self) -> int:
        """Get the total number of items."""
        return sum(item.quantity for item in self.items)
