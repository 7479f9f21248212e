"""
Cart DTOs.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from ...domain.entities.cart import Cart
from ...domain.entities.cart_item import CartItem


@dataclass
class GetCartDTO:
    user_id: Optional[str] = None
    session_id: Optional[str] = None


@dataclass
class AddCartItemDTO:
    cart_id: UUID
    variant_id: UUID
    quantity: int


@dataclass
class UpdateCartItemDTO:
    item_id: UUID
    quantity: int
    cart_id: Optional[UUID] = None


@dataclass
class RemoveCartItemDTO:
    item_id: UUID
    cart_id: Optional[UUID] = None


@dataclass
class CartDTO:
    id: UUID
    user_id: Optional[str]
    session_id: Optional[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, cart: Cart) -> 'CartDTO':
        return cls(
            id=cart.id,
            user_id=cart.user_id,
            session_id=cart.session_id,
            created_at=cart.created_at,
            updated_at=cart.updated_at,
        )


@dataclass
class CartItemDTO:
    id: UUID
    cart_id: UUID
    variant_id: UUID
    quantity: int
    price_at_add: Decimal
    subtotal: Decimal
    created_at: datetime

    @classmethod
    def from_entity(cls, item: CartItem) -> 'CartItemDTO':
        return cls(
            id=item.id,
            cart_id=item.cart_id,
            variant_id=item.variant_id,
            quantity=item.quantity,
            price_at_add=item.price_at_add,
            subtotal=item.subtotal,
            created_at=item.created_at,
        )


@dataclass
class ValidationIssueDTO:
    type: str
    message: str


@dataclass
class CartValidationIssueDTO:
    item_id: UUID
    variant_id: UUID
    issues: List[ValidationIssueDTO] = field(default_factory=list)


@dataclass
class CartValidationDTO:
    warnings: List[CartValidationIssueDTO] = field(default_factory=list)
    errors: List[CartValidationIssueDTO] = field(default_factory=list)


@dataclass
class CartWithItemsDTO(CartDTO):
    items: List[CartItemDTO] = field(default_factory=list)
    total_amount: Decimal = Decimal('0')
    validation: Optional[CartValidationDTO] = None
