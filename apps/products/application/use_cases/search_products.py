"""
Search products use case.
"""
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from shared.application.pagination import total_pages
from ...domain.repositories.product_repository import ProductQuery, ProductRepository
from ...domain.value_objects.product_status import ProductStatus
from ..dtos.product_dto import GetProductsDTO, ProductListDTO, ProductSearchItemDTO


@dataclass
class SearchProductsUseCase(UseCase[GetProductsDTO, ProductListDTO]):
    """
    Storefront search. Unlike the plain list it defaults to published
    products, prices each row from its first variant and is never cached.
    """

    product_repository: ProductRepository

    def execute(self, input_dto: GetProductsDTO) -> UseCaseResult[ProductListDTO]:
        products, total = self.product_repository.find_many(
            ProductQuery(
                page=input_dto.page,
                limit=input_dto.limit,
                status=input_dto.status or ProductStatus.PUBLISHED.value,
                category_id=input_dto.category_id,
                brand_id=input_dto.brand_id,
                search=input_dto.search,
                sort_by=input_dto.sort_by,
                sort_order=input_dto.sort_order,
            ),
            with_variants=True,
        )
        return UseCaseResult.ok(
            ProductListDTO(
                products=[ProductSearchItemDTO.from_entity(product) for product in products],
                total=total,
                page=input_dto.page,
                limit=input_dto.limit,
                total_pages=total_pages(total, input_dto.limit),
            )
        )
