# DTOs
from .account_dto import AccountDTO
from .wishlist_dto import WishlistCommandDTO, WishlistItemDTO

__all__ = ['AccountDTO', 'WishlistCommandDTO', 'WishlistItemDTO']
