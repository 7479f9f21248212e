"""
Wishlist repository interface.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from ..entities.wishlist_item import WishlistItem


@dataclass(frozen=True)
class WishlistProduct:
    """Product fields shown next to a wishlist entry."""
    id: UUID
    name: str
    slug: str
    default_image: Optional[str]
    price: Optional[Decimal]
    sale_price: Optional[Decimal]


@dataclass
class WishlistEntry:
    item: WishlistItem
    product: WishlistProduct


class WishlistRepository(ABC):
    """Abstract repository for wishlist items."""

    @abstractmethod
    def add_item(self, user_id: str, product_id: UUID) -> WishlistItem:
        """
        Add a product to the user's wishlist.

        Raises DuplicateWishlistItemError when the product is already there.
        """
        pass

    @abstractmethod
    def remove_item(self, user_id: str, product_id: UUID) -> None:
        """Remove a product from the wishlist. Missing entries are ignored."""
        pass

    @abstractmethod
    def get_user_wishlist(self, user_id: str) -> List[WishlistEntry]:
        """List the user's entries newest first, priced from each product's first variant."""
        pass

    @abstractmethod
    def exists(self, user_id: str, product_id: UUID) -> bool:
        pass
