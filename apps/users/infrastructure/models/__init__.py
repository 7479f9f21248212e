# Django ORM Models
from .account_model import AccountModel
from .wishlist_model import WishlistItemModel

__all__ = ['AccountModel', 'WishlistItemModel']
