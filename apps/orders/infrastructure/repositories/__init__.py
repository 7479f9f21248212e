# Repository implementations
from .django_cart_repository import DjangoCartRepository
from .django_order_repository import DjangoOrderRepository

__all__ = ['DjangoCartRepository', 'DjangoOrderRepository']
