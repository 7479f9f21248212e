"""
Get or create cart use case.
"""
import logging
from dataclasses import dataclass

from shared.application import ApplicationError, CacheService, UseCase, UseCaseResult
from ...domain.repositories.cart_repository import CartRepository
from ..dtos.cart_dto import CartDTO, GetCartDTO
from .get_cart_details import cart_key

logger = logging.getLogger(__name__)


def cart_user_key(user_id: str) -> str:
    return f"cart:userId:{user_id}"


def cart_session_key(session_id: str) -> str:
    return f"cart:sessionId:{session_id}"


@dataclass
class GetOrCreateCartUseCase(UseCase[GetCartDTO, CartDTO]):
    """
    Resolve the cart for a user or a guest session, creating it on first use.

    A request carrying both identifiers comes from a guest who has just signed
    in: the guest cart is merged into the user's cart. Both identity keys and
    the details keys of both carts are dropped before the merged cart is
    cached under the user key.
    """

    cart_repository: CartRepository
    cache: CacheService
    ttl: int = 60

    def execute(self, input_dto: GetCartDTO) -> UseCaseResult[CartDTO]:
        user_id, session_id = input_dto.user_id, input_dto.session_id
        if not user_id and not session_id:
            raise ApplicationError(
                message="Either user id or session id must be provided",
                code="CART_IDENTIFIER_REQUIRED",
                status_code=400,
            )

        cache_key = cart_user_key(user_id) if user_id else cart_session_key(session_id)

        if user_id and session_id:
            guest = self.cart_repository.find_by_session_id(session_id)
            cart = self.cart_repository.merge_guest_cart(user_id, session_id)
            stale_keys = [cart_user_key(user_id), cart_session_key(session_id), cart_key(cart.id)]
            if guest is not None and guest.id != cart.id:
                stale_keys.append(cart_key(guest.id))
            self.cache.delete_multiple(stale_keys)
        else:
            cached = self.cache.get(cache_key)
            if cached is not None:
                return UseCaseResult.ok(cached)

            logger.debug(f"Cart cache miss for {cache_key}")
            if user_id:
                cart = self.cart_repository.find_by_user_id(user_id)
            else:
                cart = self.cart_repository.find_by_session_id(session_id)

            if cart is None:
                cart = self.cart_repository.create_cart(user_id=user_id, session_id=session_id)
                logger.info(f"Created cart {cart.id}")

        result = CartDTO.from_entity(cart)
        self.cache.set(cache_key, result, self.ttl)
        return UseCaseResult.ok(result)
