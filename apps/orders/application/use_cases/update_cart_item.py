"""
Update cart item quantity use case.
"""
from dataclasses import dataclass
from typing import Optional

from apps.products.domain.value_objects import ProductStatus
from shared.application import ApplicationError, CacheService, UseCase, UseCaseResult
from ...domain.repositories.cart_repository import CartRepository
from ..dtos.cart_dto import CartItemDTO, UpdateCartItemDTO
from .get_cart_details import cart_key


def cart_item_not_found() -> ApplicationError:
    return ApplicationError(
        message="Cart item not found",
        code="CART_ITEM_NOT_FOUND",
        status_code=404,
    )


@dataclass
class UpdateCartItemUseCase(UseCase[UpdateCartItemDTO, Optional[CartItemDTO]]):
    """
    Set an item's quantity. A quantity of zero removes the item and the
    result carries no data.
    """

    cart_repository: CartRepository
    cache: CacheService

    def execute(self, input_dto: UpdateCartItemDTO) -> UseCaseResult[Optional[CartItemDTO]]:
        if input_dto.quantity < 0:
            raise ApplicationError(
                message="Quantity must be zero or greater",
                code="INVALID_QUANTITY",
                status_code=400,
            )

        existing = self.cart_repository.get_cart_item_with_variant(input_dto.item_id)
        if existing is None:
            raise cart_item_not_found()
        if input_dto.cart_id is not None and existing.item.cart_id != input_dto.cart_id:
            raise cart_item_not_found()

        if input_dto.quantity == 0:
            self.cart_repository.remove_item(input_dto.item_id)
            self.cache.delete(cart_key(existing.item.cart_id))
            return UseCaseResult.ok()

        variant = existing.variant
        if variant.product_status != ProductStatus.PUBLISHED.value:
            raise ApplicationError(
                message=f"Product is not available (status: {variant.product_status})",
                code="VARIANT_UNAVAILABLE",
                status_code=400,
            )
        if input_dto.quantity > variant.stock_quantity:
            raise ApplicationError(
                message=f"Insufficient stock. Only {variant.stock_quantity} items available.",
                code="INSUFFICIENT_STOCK",
                status_code=400,
            )

        updated = self.cart_repository.update_item_quantity(input_dto.item_id, input_dto.quantity)
        self.cache.delete(cart_key(updated.cart_id))
        return UseCaseResult.ok(CartItemDTO.from_entity(updated))
