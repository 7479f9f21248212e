# Domain entities
from .account import Account
from .wishlist_item import WishlistItem

__all__ = ['Account', 'WishlistItem']
