# Repository implementations
from .django_account_repository import DjangoAccountRepository
from .django_wishlist_repository import DjangoWishlistRepository

__all__ = ['DjangoAccountRepository', 'DjangoWishlistRepository']
