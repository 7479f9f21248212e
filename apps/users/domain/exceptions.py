"""
User domain exceptions.
"""
from shared.domain.exceptions import DomainError


class DuplicateWishlistItemError(DomainError):
    """Raised when a product is already on the user's wishlist."""

    def __init__(self, product_id):
        super().__init__(
            message=f"Product {product_id} is already in the wishlist",
            code="DUPLICATE_ITEM"
        )
        self.product_id = product_id
