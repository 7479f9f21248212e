# Value objects
from .price import Price
from .product_status import ProductStatus
from .slug import Slug

__all__ = ['Price', 'ProductStatus', 'Slug']
