"""
Wishlist DTOs.
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from ...domain.repositories.wishlist_repository import WishlistEntry


@dataclass
class WishlistCommandDTO:
    user_id: str
    product_id: UUID


@dataclass
class WishlistItemDTO:
    id: UUID
    product_id: UUID
    product_name: str
    product_slug: str
    product_image: Optional[str]
    price: Decimal
    sale_price: Optional[Decimal]
    created_at: datetime

    @classmethod
    def from_entry(cls, entry: WishlistEntry) -> 'WishlistItemDTO':
        product = entry.product
        return cls(
            id=entry.item.id,
            product_id=product.id,
            product_name=product.name,
            product_slug=product.slug,
            product_image=product.default_image,
            price=product.price if product.price is not None else Decimal('0'),
            sale_price=product.sale_price,
            created_at=entry.item.created_at,
        )
