# Repository interfaces
from .brand_repository import BrandQuery, BrandRepository
from .category_repository import CategoryDetails, CategoryQuery, CategoryRepository
from .product_repository import ProductDetails, ProductQuery, ProductRepository

__all__ = [
    'BrandQuery',
    'BrandRepository',
    'CategoryDetails',
    'CategoryQuery',
    'CategoryRepository',
    'ProductDetails',
    'ProductQuery',
    'ProductRepository',
]
