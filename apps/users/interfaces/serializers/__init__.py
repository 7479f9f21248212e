# Serializers
from .account_serializer import AccountSerializer
from .wishlist_serializer import WishlistAddSerializer, WishlistItemSerializer

__all__ = ['AccountSerializer', 'WishlistAddSerializer', 'WishlistItemSerializer']
