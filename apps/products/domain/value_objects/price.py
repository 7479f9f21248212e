"""
Price value object.
"""
from dataclasses import dataclass
from decimal import Decimal

from shared.domain import ValueObject
from ..exceptions import InvalidPriceError

SIGNIFICANT_RATIO = Decimal('0.01')
SIGNIFICANT_ABSOLUTE = Decimal('1000')


@dataclass(frozen=True)
class Price(ValueObject):
    """Non-negative amount in the store currency."""
    amount: Decimal

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))
        super().__post_init__()

    def validate(self) -> None:
        if self.amount < 0:
            raise InvalidPriceError(self.amount)

    def has_significant_difference(self, other: 'Price') -> bool:
        """
        True when other moved away from this price by more than 1% of this
        price or by more than 1000 units, whichever triggers first.
        """
        diff = abs(self.amount - other.amount)
        return diff > SIGNIFICANT_RATIO * self.amount or diff > SIGNIFICANT_ABSOLUTE

    def __str__(self) -> str:
        return str(self.amount)
