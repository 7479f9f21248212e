"""
Wishlist use cases.
"""
from dataclasses import dataclass
from typing import List

from apps.products.domain.repositories.product_repository import ProductRepository
from shared.application import ApplicationError, UseCase, UseCaseResult
from ...domain.repositories.wishlist_repository import WishlistRepository
from ..dtos.wishlist_dto import WishlistCommandDTO, WishlistItemDTO


@dataclass
class AddToWishlistUseCase(UseCase[WishlistCommandDTO, None]):
    """Save a product to the user's wishlist. The product must exist."""

    wishlist_repository: WishlistRepository
    product_repository: ProductRepository

    def execute(self, input_dto: WishlistCommandDTO) -> UseCaseResult[None]:
        product = self.product_repository.find_by_id(input_dto.product_id)
        if product is None:
            raise ApplicationError(
                message="Product not found",
                code="PRODUCT_NOT_FOUND",
                status_code=404,
            )

        self.wishlist_repository.add_item(input_dto.user_id, input_dto.product_id)
        return UseCaseResult.ok()


@dataclass
class RemoveFromWishlistUseCase(UseCase[WishlistCommandDTO, None]):

    wishlist_repository: WishlistRepository

    def execute(self, input_dto: WishlistCommandDTO) -> UseCaseResult[None]:
        self.wishlist_repository.remove_item(input_dto.user_id, input_dto.product_id)
        return UseCaseResult.ok()


@dataclass
class GetUserWishlistUseCase(UseCase[str, List[WishlistItemDTO]]):

    wishlist_repository: WishlistRepository

    def execute(self, input_dto: str) -> UseCaseResult[List[WishlistItemDTO]]:
        entries = self.wishlist_repository.get_user_wishlist(input_dto)
        return UseCaseResult.ok([WishlistItemDTO.from_entry(entry) for entry in entries])
