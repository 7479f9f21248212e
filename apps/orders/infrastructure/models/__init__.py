# Django models
from .cart_model import CartItemModel, CartModel
from .order_model import OrderItemModel, OrderModel

__all__ = ['CartModel', 'CartItemModel', 'OrderModel', 'OrderItemModel']
