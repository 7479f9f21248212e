"""
Base value object class for DDD.
"""
from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Immutable value compared by its attributes.
    Subclasses enforce their invariants in validate().
    """

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Raise DomainError when the value is not acceptable."""
