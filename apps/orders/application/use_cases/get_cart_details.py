"""
Cart details use case.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from shared.application import ApplicationError, CacheService, UseCase, UseCaseResult
from ...domain.repositories.cart_repository import CartRepository, CartWithItems
from ..dtos.cart_dto import CartItemDTO, CartWithItemsDTO
from ..services.cart_validation import validate_cart_items

logger = logging.getLogger(__name__)


def cart_key(cart_id) -> str:
    return f"cart:{cart_id}"


def to_cart_with_items_dto(data: CartWithItems) -> CartWithItemsDTO:
    items = [CartItemDTO.from_entity(entry.item) for entry in data.items]
    return CartWithItemsDTO(
        id=data.cart.id,
        user_id=data.cart.user_id,
        session_id=data.cart.session_id,
        created_at=data.cart.created_at,
        updated_at=data.cart.updated_at,
        items=items,
        total_amount=sum((item.subtotal for item in items), Decimal('0')),
        validation=validate_cart_items(data.items),
    )


@dataclass
class GetCartDetailsUseCase(UseCase[UUID, CartWithItemsDTO]):
    """
    Load a cart with its items checked against live variant data.

    The result is cached only while it carries no validation errors so a
    broken cart is re-checked on every read.
    """

    cart_repository: CartRepository
    cache: CacheService
    ttl: int = 300

    def execute(self, input_dto: UUID) -> UseCaseResult[CartWithItemsDTO]:
        cache_key = cart_key(input_dto)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return UseCaseResult.ok(cached)

        data = self.cart_repository.get_cart_with_items(cart_id=input_dto)
        if data is None:
            raise ApplicationError(
                message="Cart not found",
                code="CART_NOT_FOUND",
                status_code=404,
            )

        result = to_cart_with_items_dto(data)
        if result.validation is None or not result.validation.errors:
            self.cache.set(cache_key, result, self.ttl)
        else:
            logger.debug(f"Cart {input_dto} has {len(result.validation.errors)} invalid items, not cached")
        return UseCaseResult.ok(result)
