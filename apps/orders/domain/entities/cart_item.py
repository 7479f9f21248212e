"""
Cart item entity.
"""
from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from shared.domain import BaseEntity
from ..exceptions import InvalidPriceSnapshotError, InvalidQuantityError


@dataclass(kw_only=True)
class CartItem(BaseEntity):
    """A variant in a cart with the unit price captured when it was added."""
    cart_id: UUID
    variant_id: UUID
    quantity: int
    price_at_add: Decimal

    def __post_init__(self):
        if not isinstance(self.quantity, int) or isinstance(self.quantity, bool) or self.quantity <= 0:
            raise InvalidQuantityError(self.quantity)
        if not isinstance(self.price_at_add, Decimal):
            self.price_at_add = Decimal(str(self.price_at_add))
        if self.price_at_add < 0:
            raise InvalidPriceSnapshotError(self.price_at_add)

    @property
    def subtotal(self) -> Decimal:
        """Calculate the item subtotal at the captured price."""
        return self.price_at_add * self.quantity
