"""
Composition root: wires repositories, the cache and use cases together.

Built once at startup from SharedConfig.ready(); views fetch collaborators
through get_container().
"""
import logging
from functools import cached_property
from typing import Optional

from django.conf import settings

logger = logging.getLogger(__name__)


class Container:
    """Holds one instance of each adapter and builds use cases on demand."""

    def __init__(self, ttl: Optional[dict] = None):
        self.ttl = {**settings.CACHE_TTL, **(ttl or {})}

    # Adapters

    @cached_property
    def cache(self):
        from shared.infrastructure.cache import RedisCache
        return RedisCache()

    @cached_property
    def product_repository(self):
        from apps.products.infrastructure.repositories import DjangoProductRepository
        return DjangoProductRepository()

    @cached_property
    def category_repository(self):
        from apps.products.infrastructure.repositories import DjangoCategoryRepository
        return DjangoCategoryRepository()

    @cached_property
    def brand_repository(self):
        from apps.products.infrastructure.repositories import DjangoBrandRepository
        return DjangoBrandRepository()

    @cached_property
    def cart_repository(self):
        from apps.orders.infrastructure.repositories import DjangoCartRepository
        return DjangoCartRepository()

    @cached_property
    def order_repository(self):
        from apps.orders.infrastructure.repositories import DjangoOrderRepository
        return DjangoOrderRepository()

    @cached_property
    def wishlist_repository(self):
        from apps.users.infrastructure.repositories import DjangoWishlistRepository
        return DjangoWishlistRepository()

    @cached_property
    def account_repository(self):
        from apps.users.infrastructure.repositories import DjangoAccountRepository
        return DjangoAccountRepository()

    # Catalog

    def get_products(self):
        from apps.products.application.use_cases import GetProductsUseCase
        return GetProductsUseCase(self.product_repository, self.cache, self.ttl['product'])

    def search_products(self):
        from apps.products.application.use_cases import SearchProductsUseCase
        return SearchProductsUseCase(self.product_repository)

    def get_product_by_id(self):
        from apps.products.application.use_cases import GetProductByIdUseCase
        return GetProductByIdUseCase(self.product_repository, self.cache, self.ttl['product'])

    def get_product_by_slug(self):
        from apps.products.application.use_cases import GetProductBySlugUseCase
        return GetProductBySlugUseCase(self.product_repository, self.cache, self.ttl['product'])

    def create_product(self):
        from apps.products.application.use_cases import CreateProductUseCase
        return CreateProductUseCase(self.product_repository)

    def update_product(self):
        from apps.products.application.use_cases import UpdateProductUseCase
        return UpdateProductUseCase(self.product_repository, self.cache)

    def delete_product(self):
        from apps.products.application.use_cases import DeleteProductUseCase
        return DeleteProductUseCase(self.product_repository, self.cache)

    def get_categories(self):
        from apps.products.application.use_cases import GetCategoriesUseCase
        return GetCategoriesUseCase(self.category_repository, self.cache, self.ttl['category'])

    def get_category_by_id(self):
        from apps.products.application.use_cases import GetCategoryByIdUseCase
        return GetCategoryByIdUseCase(self.category_repository, self.cache, self.ttl['category'])

    def get_category_by_slug(self):
        from apps.products.application.use_cases import GetCategoryBySlugUseCase
        return GetCategoryBySlugUseCase(self.category_repository, self.cache, self.ttl['category'])

    def create_category(self):
        from apps.products.application.use_cases import CreateCategoryUseCase
        return CreateCategoryUseCase(self.category_repository)

    def update_category(self):
        from apps.products.application.use_cases import UpdateCategoryUseCase
        return UpdateCategoryUseCase(self.category_repository, self.cache)

    def delete_category(self):
        from apps.products.application.use_cases import DeleteCategoryUseCase
        return DeleteCategoryUseCase(self.category_repository, self.cache)

    def get_brands(self):
        from apps.products.application.use_cases import GetBrandsUseCase
        return GetBrandsUseCase(self.brand_repository, self.cache, self.ttl['brand'])

    # Cart and orders

    def get_or_create_cart(self):
        from apps.orders.application.use_cases import GetOrCreateCartUseCase
        return GetOrCreateCartUseCase(self.cart_repository, self.cache, self.ttl['cart'])

    def get_cart_details(self):
        from apps.orders.application.use_cases import GetCartDetailsUseCase
        return GetCartDetailsUseCase(self.cart_repository, self.cache, self.ttl['cart_details'])

    def add_item_to_cart(self):
        from apps.orders.application.use_cases import AddItemToCartUseCase
        return AddItemToCartUseCase(self.cart_repository, self.cache)

    def update_cart_item(self):
        from apps.orders.application.use_cases import UpdateCartItemUseCase
        return UpdateCartItemUseCase(self.cart_repository, self.cache)

    def remove_cart_item(self):
        from apps.orders.application.use_cases import RemoveCartItemUseCase
        return RemoveCartItemUseCase(self.cart_repository, self.cache)

    def clear_cart(self):
        from apps.orders.application.use_cases import ClearCartUseCase
        return ClearCartUseCase(self.cart_repository, self.cache)

    def clear_cart_after_order(self):
        from apps.orders.application.use_cases import ClearCartAfterOrderUseCase
        return ClearCartAfterOrderUseCase(self.cart_repository, self.cache)

    def place_order(self):
        from apps.orders.application.use_cases import PlaceOrderUseCase
        return PlaceOrderUseCase(self.cart_repository, self.order_repository, self.clear_cart_after_order())

    def get_orders(self):
        from apps.orders.application.use_cases import GetOrdersUseCase
        return GetOrdersUseCase(self.order_repository)

    def get_order(self):
        from apps.orders.application.use_cases import GetOrderUseCase
        return GetOrderUseCase(self.order_repository)

    # Users

    def add_to_wishlist(self):
        from apps.users.application.use_cases import AddToWishlistUseCase
        return AddToWishlistUseCase(self.wishlist_repository, self.product_repository)

    def remove_from_wishlist(self):
        from apps.users.application.use_cases import RemoveFromWishlistUseCase
        return RemoveFromWishlistUseCase(self.wishlist_repository)

    def get_user_wishlist(self):
        from apps.users.application.use_cases import GetUserWishlistUseCase
        return GetUserWishlistUseCase(self.wishlist_repository)

    def get_user_accounts(self):
        from apps.users.application.use_cases import GetUserAccountsUseCase
        return GetUserAccountsUseCase(self.account_repository)


_container: Optional[Container] = None


def init_container(**kwargs) -> Container:
    global _container
    _container = Container(**kwargs)
    logger.debug("Dependency container initialized")
    return _container


def get_container() -> Container:
    if _container is None:
        return init_container()
    return _container
