"""
Products API v1 views.
"""
from uuid import UUID

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.views import APIView

from shared.infrastructure.di import get_container
from shared.interfaces.responses import success_response
from ....application.dtos.brand_dto import GetBrandsDTO
from ....application.dtos.category_dto import (
    CategoryCreateDTO,
    CategoryUpdateDTO,
    GetCategoriesDTO,
)
from ....application.dtos.product_dto import (
    GetProductsDTO,
    ImageInputDTO,
    ProductCreateDTO,
    ProductUpdateDTO,
    VariantInputDTO,
)
from ...serializers import (
    BrandListSerializer,
    BrandQuerySerializer,
    CategoryCreateSerializer,
    CategoryDetailSerializer,
    CategoryListSerializer,
    CategoryQuerySerializer,
    CategoryUpdateSerializer,
    ProductCreateSerializer,
    ProductDetailSerializer,
    ProductListSerializer,
    ProductQuerySerializer,
    ProductSearchSerializer,
    ProductUpdateSerializer,
)

LIST_PARAMETERS = [
    OpenApiParameter(name='page', type=int, required=False),
    OpenApiParameter(name='limit', type=int, required=False),
    OpenApiParameter(name='sortBy', type=str, required=False, enum=['createdAt', 'updatedAt', 'name']),
    OpenApiParameter(name='sortOrder', type=str, required=False, enum=['asc', 'desc']),
    OpenApiParameter(name='search', type=str, required=False),
]

PRODUCT_FILTERS = [
    OpenApiParameter(name='status', type=str, required=False),
    OpenApiParameter(name='categoryId', type=str, required=False),
    OpenApiParameter(name='brandId', type=str, required=False),
]


def _query(serializer_class, request) -> dict:
    serializer = serializer_class(data=request.query_params.dict())
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


class CatalogWriteMixin:
    """Reads are public, writes are for staff."""

    def get_permissions(self):
        if self.request.method == 'GET':
            return [AllowAny()]
        return [IsAdminUser()]


@extend_schema(tags=['Products'])
class ProductListCreateView(CatalogWriteMixin, APIView):
    """Product list and create endpoint."""

    @extend_schema(
        parameters=LIST_PARAMETERS + PRODUCT_FILTERS,
        responses={200: ProductListSerializer},
        summary="List products",
    )
    def get(self, request):
        result = get_container().get_products().execute(
            GetProductsDTO(**_query(ProductQuerySerializer, request))
        )
        return success_response(ProductListSerializer(result.data).data, "Products retrieved successfully")

    @extend_schema(
        request=ProductCreateSerializer,
        responses={201: ProductDetailSerializer},
        summary="Create a product",
    )
    def post(self, request):
        serializer = ProductCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = dict(serializer.validated_data)
        data['variants'] = [VariantInputDTO(**variant) for variant in data.get('variants', [])]
        data['images'] = [ImageInputDTO(**image) for image in data.get('images', [])]

        result = get_container().create_product().execute(ProductCreateDTO(**data))
        return success_response(
            ProductDetailSerializer(result.data).data,
            "Product created successfully",
            status.HTTP_201_CREATED,
        )


@extend_schema(tags=['Products'])
class ProductSearchView(APIView):
    """Product search endpoint. Only published products unless a status is given."""
    permission_classes = [AllowAny]

    @extend_schema(
        parameters=LIST_PARAMETERS + PRODUCT_FILTERS,
        responses={200: ProductSearchSerializer},
        summary="Search products",
    )
    def get(self, request):
        result = get_container().search_products().execute(
            GetProductsDTO(**_query(ProductQuerySerializer, request))
        )
        return success_response(ProductSearchSerializer(result.data).data, "Products retrieved successfully")


@extend_schema(tags=['Products'])
class ProductDetailView(CatalogWriteMixin, APIView):
    """Product detail endpoint."""

    @extend_schema(responses={200: ProductDetailSerializer}, summary="Get product by id")
    def get(self, request, product_id: UUID):
        result = get_container().get_product_by_id().execute(product_id)
        return success_response(ProductDetailSerializer(result.data).data, "Product retrieved successfully")

    @extend_schema(
        request=ProductUpdateSerializer,
        responses={200: ProductDetailSerializer},
        summary="Update a product",
    )
    def patch(self, request, product_id: UUID):
        serializer = ProductUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        result = get_container().update_product().execute(
            ProductUpdateDTO(product_id=product_id, changes=dict(serializer.validated_data))
        )
        return success_response(ProductDetailSerializer(result.data).data, "Product updated successfully")

    @extend_schema(summary="Delete a product")
    def delete(self, request, product_id: UUID):
        get_container().delete_product().execute(product_id)
        return success_response(None, "Product deleted successfully")


@extend_schema(tags=['Products'])
class ProductBySlugView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(responses={200: ProductDetailSerializer}, summary="Get product by slug")
    def get(self, request, slug: str):
        result = get_container().get_product_by_slug().execute(slug)
        return success_response(ProductDetailSerializer(result.data).data, "Product retrieved successfully")


@extend_schema(tags=['Categories'])
class CategoryListCreateView(CatalogWriteMixin, APIView):
    """Category list and create endpoint."""

    @extend_schema(
        parameters=LIST_PARAMETERS + [
            OpenApiParameter(name='parentId', type=str, required=False, description="'null' for root categories"),
            OpenApiParameter(name='active', type=bool, required=False),
        ],
        responses={200: CategoryListSerializer},
        summary="List categories",
    )
    def get(self, request):
        query = _query(CategoryQuerySerializer, request)
        if query.get('parent_id') == 'null':
            query['parent_id'] = None
            query['roots_only'] = True

        result = get_container().get_categories().execute(GetCategoriesDTO(**query))
        return success_response(CategoryListSerializer(result.data).data, "Categories retrieved successfully")

    @extend_schema(
        request=CategoryCreateSerializer,
        responses={201: CategoryDetailSerializer},
        summary="Create a category",
    )
    def post(self, request):
        serializer = CategoryCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = get_container().create_category().execute(CategoryCreateDTO(**serializer.validated_data))
        return success_response(
            CategoryDetailSerializer(result.data).data,
            "Category created successfully",
            status.HTTP_201_CREATED,
        )


@extend_schema(tags=['Categories'])
class CategoryDetailView(CatalogWriteMixin, APIView):
    """Category detail endpoint."""

    @extend_schema(responses={200: CategoryDetailSerializer}, summary="Get category by id")
    def get(self, request, category_id: UUID):
        result = get_container().get_category_by_id().execute(category_id)
        return success_response(CategoryDetailSerializer(result.data).data, "Category retrieved successfully")

    @extend_schema(
        request=CategoryUpdateSerializer,
        responses={200: CategoryDetailSerializer},
        summary="Update a category",
    )
    def patch(self, request, category_id: UUID):
        serializer = CategoryUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        result = get_container().update_category().execute(
            CategoryUpdateDTO(category_id=category_id, changes=dict(serializer.validated_data))
        )
        return success_response(CategoryDetailSerializer(result.data).data, "Category updated successfully")

    @extend_schema(summary="Delete a category")
    def delete(self, request, category_id: UUID):
        get_container().delete_category().execute(category_id)
        return success_response(None, "Category deleted successfully")


@extend_schema(tags=['Categories'])
class CategoryBySlugView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(responses={200: CategoryDetailSerializer}, summary="Get category by slug")
    def get(self, request, slug: str):
        result = get_container().get_category_by_slug().execute(slug)
        return success_response(CategoryDetailSerializer(result.data).data, "Category retrieved successfully")


@extend_schema(tags=['Brands'])
class BrandListView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        parameters=LIST_PARAMETERS + [OpenApiParameter(name='active', type=bool, required=False)],
        responses={200: BrandListSerializer},
        summary="List brands",
    )
    def get(self, request):
        result = get_container().get_brands().execute(GetBrandsDTO(**_query(BrandQuerySerializer, request)))
        return success_response(BrandListSerializer(result.data).data, "Brands retrieved successfully")
