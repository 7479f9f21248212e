"""
Clear cart use cases.
"""
import logging
from dataclasses import dataclass
from uuid import UUID

from shared.application import ApplicationError, CacheService, UseCase, UseCaseResult
from ...domain.repositories.cart_repository import CartRepository
from ..dtos.cart_dto import GetCartDTO
from .get_cart_details import cart_key

logger = logging.getLogger(__name__)


@dataclass
class ClearCartUseCase(UseCase[UUID, None]):
    """Remove every item from an existing cart."""

    cart_repository: CartRepository
    cache: CacheService

    def execute(self, input_dto: UUID) -> UseCaseResult[None]:
        cart = self.cart_repository.find_by_id(input_dto)
        if cart is None:
            raise ApplicationError(
                message="Cart not found",
                code="CART_NOT_FOUND",
                status_code=404,
            )

        self.cart_repository.clear_cart(cart.id)
        self.cache.delete(cart_key(cart.id))
        return UseCaseResult.ok()


@dataclass
class ClearCartAfterOrderUseCase(UseCase[GetCartDTO, None]):
    """
    Empty the buyer's cart once an order went through. A buyer without a
    cart is not an error.
    """

    cart_repository: CartRepository
    cache: CacheService

    def execute(self, input_dto: GetCartDTO) -> UseCaseResult[None]:
        if not input_dto.user_id and not input_dto.session_id:
            raise ApplicationError(
                message="Either user id or session id must be provided",
                code="CART_IDENTIFIER_REQUIRED",
                status_code=400,
            )

        if input_dto.user_id:
            cart = self.cart_repository.find_by_user_id(input_dto.user_id)
        else:
            cart = self.cart_repository.find_by_session_id(input_dto.session_id)

        if cart is None:
            return UseCaseResult.ok()

        self.cart_repository.clear_cart(cart.id)
        self.cache.delete(cart_key(cart.id))
        logger.info(f"Cleared cart {cart.id} after order")
        return UseCaseResult.ok()
