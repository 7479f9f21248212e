# Serializers
from .category_serializer import (
    BrandListSerializer,
    BrandSerializer,
    CategoryCreateSerializer,
    CategoryDetailSerializer,
    CategoryListSerializer,
    CategorySerializer,
    CategoryUpdateSerializer,
)
from .product_serializer import (
    ProductCreateSerializer,
    ProductDetailSerializer,
    ProductListSerializer,
    ProductSearchSerializer,
    ProductSerializer,
    ProductUpdateSerializer,
)
from .query_serializer import (
    BrandQuerySerializer,
    CategoryQuerySerializer,
    ListQuerySerializer,
    ProductQuerySerializer,
)

__all__ = [
    'BrandListSerializer',
    'BrandSerializer',
    'CategoryCreateSerializer',
    'CategoryDetailSerializer',
    'CategoryListSerializer',
    'CategorySerializer',
    'CategoryUpdateSerializer',
    'ProductCreateSerializer',
    'ProductDetailSerializer',
    'ProductListSerializer',
    'ProductSearchSerializer',
    'ProductSerializer',
    'ProductUpdateSerializer',
    'BrandQuerySerializer',
    'CategoryQuerySerializer',
    'ListQuerySerializer',
    'ProductQuerySerializer',
]
