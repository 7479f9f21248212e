# Use cases
from .create_category import CreateCategoryUseCase
from .create_product import CreateProductUseCase
from .delete_category import DeleteCategoryUseCase
from .delete_product import DeleteProductUseCase
from .get_brands import GetBrandsUseCase
from .get_categories import GetCategoriesUseCase
from .get_category import GetCategoryByIdUseCase, GetCategoryBySlugUseCase
from .get_product import GetProductByIdUseCase, GetProductBySlugUseCase
from .get_products import GetProductsUseCase
from .search_products import SearchProductsUseCase
from .update_category import UpdateCategoryUseCase
from .update_product import UpdateProductUseCase

__all__ = [
    'CreateCategoryUseCase',
    'CreateProductUseCase',
    'DeleteCategoryUseCase',
    'DeleteProductUseCase',
    'GetBrandsUseCase',
    'GetCategoriesUseCase',
    'GetCategoryByIdUseCase',
    'GetCategoryBySlugUseCase',
    'GetProductByIdUseCase',
    'GetProductBySlugUseCase',
    'GetProductsUseCase',
    'SearchProductsUseCase',
    'UpdateCategoryUseCase',
    'UpdateProductUseCase',
]
