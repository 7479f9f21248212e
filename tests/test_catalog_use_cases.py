"""
Catalog use cases against mocked repositories.
"""
from unittest.mock import Mock
from uuid import uuid4

import pytest

from apps.products.application.dtos.brand_dto import GetBrandsDTO
from apps.products.application.dtos.category_dto import CategoryUpdateDTO, GetCategoriesDTO
from apps.products.application.dtos.product_dto import GetProductsDTO, ProductUpdateDTO
from apps.products.application.use_cases import (
    DeleteProductUseCase,
    GetBrandsUseCase,
    GetCategoriesUseCase,
    GetProductBySlugUseCase,
    GetProductsUseCase,
    SearchProductsUseCase,
    UpdateCategoryUseCase,
    UpdateProductUseCase,
)
from apps.products.domain.entities import Brand, Category, Product
from apps.products.domain.entities.product import ProductVariant
from apps.products.domain.repositories.brand_repository import BrandRepository
from apps.products.domain.repositories.category_repository import CategoryRepository
from apps.products.domain.repositories.product_repository import ProductDetails, ProductRepository
from apps.products.domain.value_objects import Price, Slug
from shared.application import ApplicationError, NotFoundError


@pytest.fixture
def product_repository():
    return Mock(spec=ProductRepository)


@pytest.fixture
def category_repository():
    return Mock(spec=CategoryRepository)


class TestDeleteProduct:

    def test_deletes_and_invalidates_detail_keys(self, product_repository, memory_cache):
        product = Product.create(name='Desk', slug='desk')
        product_repository.find_by_id.return_value = product
        memory_cache.store[f'product:id:{product.id}'] = 'cached'
        memory_cache.store['product:slug:desk'] = 'cached'

        DeleteProductUseCase(product_repository, memory_cache).execute(product.id)

        product_repository.delete.assert_called_once_with(product.id)
        assert set(memory_cache.deleted) == {f'product:id:{product.id}', 'product:slug:desk'}
        assert memory_cache.store == {}

    def test_missing_product(self, product_repository, memory_cache):
        product_repository.find_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            DeleteProductUseCase(product_repository, memory_cache).execute(uuid4())

        assert exc_info.value.status_code == 404
        product_repository.delete.assert_not_called()
        assert memory_cache.deleted == []


class TestUpdateProduct:

    def test_slug_change_invalidates_old_and_new(self, product_repository, memory_cache):
        product = Product.create(name='Desk', slug='desk')
        product_repository.find_by_id.return_value = product
        product_repository.exists_by_slug.return_value = False
        product_repository.find_by_id_with_details.return_value = ProductDetails(product=product)

        result = UpdateProductUseCase(product_repository, memory_cache).execute(
            ProductUpdateDTO(product_id=product.id, changes={'slug': 'standing-desk', 'name': 'Standing desk'})
        )

        assert result.data.slug == 'standing-desk'
        assert result.data.name == 'Standing desk'
        assert set(memory_cache.deleted) == {
            f'product:id:{product.id}', 'product:slug:desk', 'product:slug:standing-desk',
        }

    def test_taken_slug(self, product_repository, memory_cache):
        product_repository.find_by_id.return_value = Product.create(name='Desk', slug='desk')
        product_repository.exists_by_slug.return_value = True

        with pytest.raises(ApplicationError) as exc_info:
            UpdateProductUseCase(product_repository, memory_cache).execute(
                ProductUpdateDTO(product_id=uuid4(), changes={'slug': 'chair'})
            )

        assert exc_info.value.code == 'SLUG_EXISTS'
        assert exc_info.value.status_code == 409
        product_repository.update.assert_not_called()


class TestGetProducts:

    def test_list_is_cached_under_normalized_key(self, product_repository, memory_cache):
        product_repository.find_many.return_value = ([Product.create(name='Desk', slug='desk')], 21)
        use_case = GetProductsUseCase(product_repository, memory_cache, ttl=300)

        result = use_case.execute(GetProductsDTO(search=''))
        use_case.execute(GetProductsDTO())

        assert result.data.total_pages == 3
        product_repository.find_many.assert_called_once()
        assert memory_cache.sets == [('product:list:page:1:limit:10:sort_by:created_at:sort_order:desc', 300)]

    def test_slug_miss(self, product_repository, memory_cache):
        product_repository.find_by_slug_with_details.return_value = None

        with pytest.raises(NotFoundError):
            GetProductBySlugUseCase(product_repository, memory_cache).execute('missing')

        assert memory_cache.sets == []


class TestSearchProducts:

    def test_defaults_to_published_and_prices_first_variant(self, product_repository):
        product = Product.create(name='Desk', slug='desk', status='PUBLISHED')
        product.variants = [
            ProductVariant(product_id=product.id, price=Price('200'), sale_price=Price('150')),
            ProductVariant(product_id=product.id, price=Price('300')),
        ]
        product_repository.find_many.return_value = ([product], 1)

        result = SearchProductsUseCase(product_repository).execute(GetProductsDTO(search='desk'))

        query = product_repository.find_many.call_args.args[0]
        assert query.status == 'PUBLISHED'
        assert product_repository.find_many.call_args.kwargs == {'with_variants': True}
        row = result.data.products[0]
        assert (row.price, row.sale_price, row.variant_count) == (Price('200').amount, Price('150').amount, 2)


class TestCategories:

    def test_root_filter_key(self, category_repository, memory_cache):
        category_repository.find_many.return_value = ([], 0)

        GetCategoriesUseCase(category_repository, memory_cache).execute(GetCategoriesDTO(roots_only=True, is_active=True))

        key, _ = memory_cache.sets[0]
        assert key == 'category:list:page:1:limit:10:parent_id:null:active:true:sort_by:created_at:sort_order:desc'
        assert category_repository.find_many.call_args.args[0].roots_only is True

    def test_self_parent_is_circular(self, category_repository, memory_cache):
        category = Category.create(name='Shoes', slug='shoes')
        category_repository.find_by_id.return_value = category

        with pytest.raises(ApplicationError) as exc_info:
            UpdateCategoryUseCase(category_repository, memory_cache).execute(
                CategoryUpdateDTO(category_id=category.id, changes={'parent_id': category.id})
            )

        assert exc_info.value.code == 'CIRCULAR_REFERENCE'
        category_repository.update.assert_not_called()

    def test_descendant_parent_is_circular(self, category_repository, memory_cache):
        root = Category.create(name='Shoes', slug='shoes')
        child = Category.create(name='Boots', slug='boots', parent_id=root.id)
        category_repository.find_by_id.side_effect = lambda category_id: {root.id: root, child.id: child}[category_id]
        category_repository.find_all.return_value = [root, child]

        with pytest.raises(ApplicationError) as exc_info:
            UpdateCategoryUseCase(category_repository, memory_cache).execute(
                CategoryUpdateDTO(category_id=root.id, changes={'parent_id': child.id})
            )

        assert exc_info.value.code == 'CIRCULAR_REFERENCE'

    def test_missing_category(self, category_repository, memory_cache):
        category_repository.find_by_id.return_value = None

        with pytest.raises(ApplicationError) as exc_info:
            UpdateCategoryUseCase(category_repository, memory_cache).execute(
                CategoryUpdateDTO(category_id=uuid4(), changes={'name': 'Other'})
            )

        assert exc_info.value.code == 'CATEGORY_NOT_FOUND'


class TestBrands:

    def test_same_query_hits_cache(self, memory_cache):
        brand_repository = Mock(spec=BrandRepository)
        brand_repository.find_many.return_value = ([Brand(name='Acme', slug=Slug('acme'))], 1)
        use_case = GetBrandsUseCase(brand_repository, memory_cache, ttl=600)

        first = use_case.execute(GetBrandsDTO())
        second = use_case.execute(GetBrandsDTO())

        assert first.data is second.data
        brand_repository.find_many.assert_called_once()
        assert memory_cache.sets == [('brand:list:page:1:limit:50:active:true:sort_by:name:sort_order:asc', 600)]
