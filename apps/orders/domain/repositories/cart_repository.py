"""
Cart repository interface.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from ..entities.cart import Cart
from ..entities.cart_item import CartItem


@dataclass(frozen=True)
class VariantInfo:
    """Live stock, price and product status of a variant, read fresh each time."""
    variant_id: UUID
    product_id: UUID
    stock_quantity: int
    price: Decimal
    sale_price: Optional[Decimal]
    product_status: str

    @property
    def effective_price(self) -> Decimal:
        return self.sale_price if self.sale_price is not None else self.price


@dataclass
class CartItemWithVariant:
    item: CartItem
    variant: VariantInfo


@dataclass
class CartWithItems:
    cart: Cart
    items: List[CartItemWithVariant] = field(default_factory=list)


class CartRepository(ABC):
    """Abstract repository for Cart aggregate."""

    @abstractmethod
    def find_by_id(self, cart_id: UUID) -> Optional[Cart]:
        """Find a cart by ID."""
        pass

    @abstractmethod
    def find_by_user_id(self, user_id: str) -> Optional[Cart]:
        """Find a cart by user ID."""
        pass

    @abstractmethod
    def find_by_session_id(self, session_id: str) -> Optional[Cart]:
        """Find a guest cart by session ID."""
        pass

    @abstractmethod
    def create_cart(self, user_id: Optional[str] = None, session_id: Optional[str] = None) -> Cart:
        """
        Create a cart for a user or a guest session.

        When a concurrent request created the cart first, that cart is
        returned instead of failing.
        """
        pass

    @abstractmethod
    def merge_guest_cart(self, user_id: str, session_id: str) -> Cart:
        """
        Fold the session's guest cart into the user's cart in one transaction
        and return the surviving user cart.
        """
        pass

    @abstractmethod
    def get_cart_with_items(
        self,
        cart_id: Optional[UUID] = None,
        user_id: Optional[str] = None,
        session_id: Optional[str] = None,
    ) -> Optional[CartWithItems]:
        """Load a cart with its items and a fresh snapshot of each variant."""
        pass

    @abstractmethod
    def find_item(self, cart_id: UUID, variant_id: UUID) -> Optional[CartItem]:
        """Find the cart's line for a variant, if there is one."""
        pass

    @abstractmethod
    def add_or_update_item(self, cart_id: UUID, variant_id: UUID, quantity: int, price_snapshot: Decimal) -> CartItem:
        """
        Add a variant to the cart. An existing line for the same variant gets
        its quantity increased and its price snapshot overwritten.
        """
        pass

    @abstractmethod
    def update_item_quantity(self, item_id: UUID, quantity: int) -> CartItem:
        """Set an item's quantity."""
        pass

    @abstractmethod
    def remove_item(self, item_id: UUID) -> None:
        """Remove a single item."""
        pass

    @abstractmethod
    def clear_cart(self, cart_id: UUID) -> None:
        """Remove every item from a cart, keeping the cart itself."""
        pass

    @abstractmethod
    def delete_cart(self, cart_id: UUID) -> None:
        """Delete a cart and its items."""
        pass

    @abstractmethod
    def get_variant_info(self, variant_id: UUID) -> Optional[VariantInfo]:
        """Read a variant's stock, prices and product status."""
        pass

    @abstractmethod
    def get_cart_item_with_variant(self, item_id: UUID) -> Optional[CartItemWithVariant]:
        """Load a single item together with its variant snapshot."""
        pass
