"""
Product status value object.
"""
from enum import Enum


class ProductStatus(str, Enum):
    """Lifecycle of a catalog product. Only PUBLISHED products are sellable."""
    DRAFT = 'DRAFT'
    PUBLISHED = 'PUBLISHED'
    ARCHIVED = 'ARCHIVED'

    @classmethod
    def choices(cls):
        return [(status.value, status.value.title()) for status in cls]
