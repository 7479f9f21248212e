"""
Wishlist item entity.
"""
from dataclasses import dataclass
from uuid import UUID

from shared.domain import BaseEntity


@dataclass(kw_only=True)
class WishlistItem(BaseEntity):
    """A product a user saved for later. One entry per user and product."""
    user_id: str
    product_id: UUID

    @classmethod
    def create(cls, user_id: str, product_id: UUID) -> 'WishlistItem':
        return cls(user_id=user_id, product_id=product_id)
