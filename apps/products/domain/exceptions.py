"""
Catalog domain exceptions.
"""
from shared.domain.exceptions import DomainError


class InvalidSlugError(DomainError):
    """Raised when a slug contains characters outside [a-z0-9-_]."""

    def __init__(self, slug: str):
        super().__init__(
            message="Slug must contain only lowercase letters, numbers, hyphens, and underscores",
            code="INVALID_SLUG"
        )
        self.slug = slug


class InvalidPriceError(DomainError):
    """Raised when a price is negative."""

    def __init__(self, amount):
        super().__init__(
            message=f"Price cannot be negative: {amount}",
            code="INVALID_PRICE"
        )
        self.amount = amount


class ArchivedProductError(DomainError):
    """Raised when an archived product is published or drafted directly."""

    def __init__(self, action: str):
        super().__init__(
            message=f"Cannot {action} archived product",
            code=f"CANNOT_{action.upper()}_ARCHIVED"
        )
        self.action = action
