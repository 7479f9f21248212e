"""
Cart and order domain exceptions.
"""
from shared.domain.exceptions import DomainError


class InvalidCartOwnerError(DomainError):
    """Raised when a cart has neither or both of user id and session id."""

    def __init__(self):
        super().__init__(
            message="Cart must belong to exactly one of a user or a guest session",
            code="INVALID_CART_OWNER"
        )


class InvalidQuantityError(DomainError):
    """Raised when a cart item quantity is not a positive integer."""

    def __init__(self, quantity):
        super().__init__(
            message=f"Quantity must be a positive integer, got {quantity}",
            code="INVALID_QTY"
        )
        self.quantity = quantity


class InvalidPriceSnapshotError(DomainError):
    """Raised when the price captured at add time is negative."""

    def __init__(self, price):
        super().__init__(
            message=f"Price at add must be non-negative, got {price}",
            code="INVALID_PRICE"
        )
        self.price = price
