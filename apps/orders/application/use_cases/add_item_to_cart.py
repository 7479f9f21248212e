"""
Add item to cart use case.
"""
import logging
from dataclasses import dataclass

from apps.products.domain.value_objects import ProductStatus
from shared.application import ApplicationError, CacheService, UseCase, UseCaseResult
from ...domain.repositories.cart_repository import CartRepository
from ..dtos.cart_dto import AddCartItemDTO, CartItemDTO
from .get_cart_details import cart_key

logger = logging.getLogger(__name__)


@dataclass
class AddItemToCartUseCase(UseCase[AddCartItemDTO, CartItemDTO]):
    """
    Put a variant in the cart at its current effective price.

    Adding a variant already in the cart increases its quantity and refreshes
    the price snapshot.
    """

    cart_repository: CartRepository
    cache: CacheService

    def execute(self, input_dto: AddCartItemDTO) -> UseCaseResult[CartItemDTO]:
        if input_dto.quantity <= 0:
            raise ApplicationError(
                message="Quantity must be greater than 0",
                code="INVALID_QUANTITY",
                status_code=400,
            )

        variant = self.cart_repository.get_variant_info(input_dto.variant_id)
        if variant is None:
            raise ApplicationError(
                message="Product variant not found",
                code="VARIANT_NOT_FOUND",
                status_code=404,
            )

        if variant.product_status != ProductStatus.PUBLISHED.value:
            raise ApplicationError(
                message=f"Product is not available (status: {variant.product_status})",
                code="VARIANT_UNAVAILABLE",
                status_code=400,
            )

        existing = self.cart_repository.find_item(input_dto.cart_id, input_dto.variant_id)
        in_cart = existing.quantity if existing is not None else 0
        if in_cart + input_dto.quantity > variant.stock_quantity:
            raise ApplicationError(
                message=(
                    f"Insufficient stock. Only {variant.stock_quantity} items available, "
                    f"but cart would have {in_cart + input_dto.quantity}."
                ),
                code="INSUFFICIENT_STOCK",
                status_code=400,
            )

        item = self.cart_repository.add_or_update_item(
            cart_id=input_dto.cart_id,
            variant_id=input_dto.variant_id,
            quantity=input_dto.quantity,
            price_snapshot=variant.effective_price,
        )
        self.cache.delete(cart_key(input_dto.cart_id))
        logger.info(f"Added variant {input_dto.variant_id} x{input_dto.quantity} to cart {input_dto.cart_id}")
        return UseCaseResult.ok(CartItemDTO.from_entity(item))
