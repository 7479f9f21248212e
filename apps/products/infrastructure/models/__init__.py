# Django models
from .brand_model import BrandModel
from .category_model import CategoryModel
from .product_model import ProductImageModel, ProductModel, ProductVariantModel

__all__ = [
    'BrandModel',
    'CategoryModel',
    'ProductImageModel',
    'ProductModel',
    'ProductVariantModel',
]
