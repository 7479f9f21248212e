"""
Order status value object.
"""
from enum import Enum


class OrderStatus(str, Enum):
    PENDING = 'PENDING'
    PAID = 'PAID'
    SHIPPED = 'SHIPPED'
    DELIVERED = 'DELIVERED'
    CANCELLED = 'CANCELLED'

    @classmethod
    def choices(cls):
        return [(status.value, status.value.title()) for status in cls]
