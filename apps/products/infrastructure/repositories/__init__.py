# Repository implementations
from .django_brand_repository import DjangoBrandRepository
from .django_category_repository import DjangoCategoryRepository
from .django_product_repository import DjangoProductRepository

__all__ = ['DjangoBrandRepository', 'DjangoCategoryRepository', 'DjangoProductRepository']
