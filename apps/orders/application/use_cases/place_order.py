"""
Place order use case.
"""
import logging
from dataclasses import dataclass

from shared.application import ApplicationError, UseCase, UseCaseResult
from ...domain.entities.order import Order
from ...domain.entities.order_item import OrderItem
from ...domain.repositories.cart_repository import CartRepository
from ...domain.repositories.order_repository import OrderRepository
from ..dtos.cart_dto import GetCartDTO
from ..dtos.order_dto import OrderDTO
from ..services.cart_validation import validate_cart_items
from .clear_cart import ClearCartAfterOrderUseCase

logger = logging.getLogger(__name__)


@dataclass
class PlaceOrderUseCase(UseCase[str, OrderDTO]):
    """
    Turn the user's cart into an order priced at the cart's snapshots, then
    empty the cart.

    A cart with blocking validation errors (unavailable product or short
    stock) is rejected as a whole. Price-change warnings do not block.
    """

    cart_repository: CartRepository
    order_repository: OrderRepository
    clear_cart_after_order: ClearCartAfterOrderUseCase

    def execute(self, input_dto: str) -> UseCaseResult[OrderDTO]:
        data = self.cart_repository.get_cart_with_items(user_id=input_dto)
        if data is None or not data.items:
            raise ApplicationError(
                message="Cart is empty",
                code="EMPTY_CART",
                status_code=400,
            )

        validation = validate_cart_items(data.items)
        if validation is not None and validation.errors:
            raise ApplicationError(
                message="Cart has items that cannot be ordered",
                code="CART_INVALID",
                status_code=400,
            )

        order = Order.create(
            user_id=input_dto,
            items=[
                OrderItem(
                    variant_id=entry.item.variant_id,
                    quantity=entry.item.quantity,
                    unit_price=entry.item.price_at_add,
                )
                for entry in data.items
            ],
        )
        saved = self.order_repository.create_order(order)
        logger.info(f"Placed order {saved.id} for user {input_dto} ({saved.item_count} items)")

        self.clear_cart_after_order.execute(GetCartDTO(user_id=input_dto))
        return UseCaseResult.ok(OrderDTO.from_entity(saved))
