"""
Order query use cases.
"""
from dataclasses import dataclass
from typing import List

from shared.application import ApplicationError, UseCase, UseCaseResult
from ...domain.repositories.order_repository import OrderRepository
from ..dtos.order_dto import GetOrderDTO, OrderDTO


@dataclass
class GetOrdersUseCase(UseCase[str, List[OrderDTO]]):

    order_repository: OrderRepository

    def execute(self, input_dto: str) -> UseCaseResult[List[OrderDTO]]:
        orders = self.order_repository.get_orders_by_user(input_dto)
        return UseCaseResult.ok([OrderDTO.from_entity(order) for order in orders])


@dataclass
class GetOrderUseCase(UseCase[GetOrderDTO, OrderDTO]):
    """Fetch one of the caller's orders. Other users' orders read as missing."""

    order_repository: OrderRepository

    def execute(self, input_dto: GetOrderDTO) -> UseCaseResult[OrderDTO]:
        order = self.order_repository.get_order_with_items(input_dto.order_id)
        if order is None or order.user_id != input_dto.user_id:
            raise ApplicationError(
                message="Order not found",
                code="ORDER_NOT_FOUND",
                status_code=404,
            )
        return UseCaseResult.ok(OrderDTO.from_entity(order))
