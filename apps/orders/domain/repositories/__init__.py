# Repository interfaces
from .cart_repository import CartItemWithVariant, CartRepository, CartWithItems, VariantInfo
from .order_repository import OrderRepository

__all__ = [
    'CartItemWithVariant',
    'CartRepository',
    'CartWithItems',
    'VariantInfo',
    'OrderRepository',
]
