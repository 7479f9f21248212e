"""
Order item entity.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID

from shared.domain import BaseEntity


@dataclass(kw_only=True)
class OrderItem(BaseEntity):
    """Order line frozen at the cart's captured price."""
    variant_id: UUID
    quantity: int
    unit_price: Decimal
    order_id: Optional[UUID] = None

    @property
    def subtotal(self) -> Decimal:
        """Calculate the item subtotal."""
        return self.unit_price * self.quantity
