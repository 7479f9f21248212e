# DTOs
from .cart_dto import (
    AddCartItemDTO,
    CartDTO,
    CartItemDTO,
    CartValidationDTO,
    CartValidationIssueDTO,
    CartWithItemsDTO,
    GetCartDTO,
    RemoveCartItemDTO,
    UpdateCartItemDTO,
    ValidationIssueDTO,
)
from .order_dto import GetOrderDTO, OrderDTO, OrderItemDTO

__all__ = [
    'AddCartItemDTO',
    'CartDTO',
    'CartItemDTO',
    'CartValidationDTO',
    'CartValidationIssueDTO',
    'CartWithItemsDTO',
    'GetCartDTO',
    'RemoveCartItemDTO',
    'UpdateCartItemDTO',
    'ValidationIssueDTO',
    'GetOrderDTO',
    'OrderDTO',
    'OrderItemDTO',
]
