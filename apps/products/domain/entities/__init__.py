# Domain entities
from .brand import Brand
from .category import Category
from .product import Product, ProductImage, ProductVariant

__all__ = ['Brand', 'Category', 'Product', 'ProductImage', 'ProductVariant']
