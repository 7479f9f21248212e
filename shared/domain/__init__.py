# Shared domain module
from .base_entity import BaseEntity, AggregateRoot
from .base_value_object import ValueObject
from .exceptions import DomainError

__all__ = [
    'BaseEntity',
    'AggregateRoot',
    'ValueObject',
    'DomainError',
]
