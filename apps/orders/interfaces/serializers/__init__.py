# Serializers
from .cart_serializer import (
    CartItemCreateSerializer,
    CartItemSerializer,
    CartItemUpdateSerializer,
    CartSerializer,
    CartWithItemsSerializer,
)
from .order_serializer import OrderLineSerializer, OrderSerializer

__all__ = [
    'CartItemCreateSerializer',
    'CartItemSerializer',
    'CartItemUpdateSerializer',
    'CartSerializer',
    'CartWithItemsSerializer',
    'OrderLineSerializer',
    'OrderSerializer',
]
