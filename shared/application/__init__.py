# Shared application module
from .base_use_case import UseCase, UseCaseResult
from .cache import CacheService
from .exceptions import ApplicationError, NotFoundError

__all__ = [
    'UseCase',
    'UseCaseResult',
    'CacheService',
    'ApplicationError',
    'NotFoundError',
]
