# DTOs
from .brand_dto import BrandDTO, BrandListDTO, GetBrandsDTO
from .category_dto import (
    CategoryCreateDTO,
    CategoryDetailDTO,
    CategoryDTO,
    CategoryListDTO,
    CategoryUpdateDTO,
    GetCategoriesDTO,
)
from .product_dto import (
    GetProductsDTO,
    ImageInputDTO,
    ProductCreateDTO,
    ProductDetailDTO,
    ProductDTO,
    ProductListDTO,
    ProductSearchItemDTO,
    ProductUpdateDTO,
    VariantInputDTO,
)

__all__ = [
    'BrandDTO',
    'BrandListDTO',
    'GetBrandsDTO',
    'CategoryCreateDTO',
    'CategoryDetailDTO',
    'CategoryDTO',
    'CategoryListDTO',
    'CategoryUpdateDTO',
    'GetCategoriesDTO',
    'GetProductsDTO',
    'ImageInputDTO',
    'ProductCreateDTO',
    'ProductDetailDTO',
    'ProductDTO',
    'ProductListDTO',
    'ProductSearchItemDTO',
    'ProductUpdateDTO',
    'VariantInputDTO',
]
