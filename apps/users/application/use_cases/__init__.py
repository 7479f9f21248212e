# Use cases
from .get_user_accounts import GetUserAccountsUseCase
from .wishlist import AddToWishlistUseCase, GetUserWishlistUseCase, RemoveFromWishlistUseCase

__all__ = [
    'AddToWishlistUseCase',
    'GetUserAccountsUseCase',
    'GetUserWishlistUseCase',
    'RemoveFromWishlistUseCase',
]
