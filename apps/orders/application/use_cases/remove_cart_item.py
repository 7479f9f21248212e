"""
Remove cart item use case.
"""
from dataclasses import dataclass

from shared.application import CacheService, UseCase, UseCaseResult
from ...domain.repositories.cart_repository import CartRepository
from ..dtos.cart_dto import RemoveCartItemDTO
from .get_cart_details import cart_key
from .update_cart_item import cart_item_not_found


@dataclass
class RemoveCartItemUseCase(UseCase[RemoveCartItemDTO, None]):

    cart_repository: CartRepository
    cache: CacheService

    def execute(self, input_dto: RemoveCartItemDTO) -> UseCaseResult[None]:
        existing = self.cart_repository.get_cart_item_with_variant(input_dto.item_id)
        if existing is None:
            raise cart_item_not_found()
        if input_dto.cart_id is not None and existing.item.cart_id != input_dto.cart_id:
            raise cart_item_not_found()

        self.cart_repository.remove_item(input_dto.item_id)
        self.cache.delete(cart_key(existing.item.cart_id))
        return UseCaseResult.ok()
