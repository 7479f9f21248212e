# Use cases
from .add_item_to_cart import AddItemToCartUseCase
from .clear_cart import ClearCartAfterOrderUseCase, ClearCartUseCase
from .get_cart_details import GetCartDetailsUseCase
from .get_or_create_cart import GetOrCreateCartUseCase
from .get_orders import GetOrderUseCase, GetOrdersUseCase
from .place_order import PlaceOrderUseCase
from .remove_cart_item import RemoveCartItemUseCase
from .update_cart_item import UpdateCartItemUseCase

__all__ = [
    'AddItemToCartUseCase',
    'ClearCartAfterOrderUseCase',
    'ClearCartUseCase',
    'GetCartDetailsUseCase',
    'GetOrCreateCartUseCase',
    'GetOrderUseCase',
    'GetOrdersUseCase',
    'PlaceOrderUseCase',
    'RemoveCartItemUseCase',
    'UpdateCartItemUseCase',
]
