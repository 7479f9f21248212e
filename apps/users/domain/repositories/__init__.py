# Repository interfaces
from .account_repository import AccountRepository
from .wishlist_repository import WishlistEntry, WishlistProduct, WishlistRepository

__all__ = ['AccountRepository', 'WishlistEntry', 'WishlistProduct', 'WishlistRepository']
