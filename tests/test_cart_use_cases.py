"""
Cart use cases against mocked repositories.
"""
from decimal import Decimal
from unittest.mock import Mock
from uuid import uuid4

import pytest

from apps.orders.application.dtos import AddCartItemDTO, GetCartDTO, RemoveCartItemDTO, UpdateCartItemDTO
from apps.orders.application.use_cases import (
    AddItemToCartUseCase,
    ClearCartAfterOrderUseCase,
    ClearCartUseCase,
    GetCartDetailsUseCase,
    GetOrCreateCartUseCase,
    RemoveCartItemUseCase,
    UpdateCartItemUseCase,
)
from apps.orders.domain.entities import Cart, CartItem
from apps.orders.domain.repositories.cart_repository import (
    CartItemWithVariant,
    CartRepository,
    CartWithItems,
    VariantInfo,
)
from shared.application import ApplicationError


@pytest.fixture
def cart_repository():
    repository = Mock(spec=CartRepository)
    repository.find_item.return_value = None
    return repository


def variant_info(stock=10, price='100.00', sale_price=None, status='PUBLISHED', variant_id=None):
    return VariantInfo(
        variant_id=variant_id or uuid4(),
        product_id=uuid4(),
        stock_quantity=stock,
        price=Decimal(price),
        sale_price=Decimal(sale_price) if sale_price is not None else None,
        product_status=status,
    )


def cart_entry(cart_id, quantity=1, price_at_add='100.00', **variant_kwargs):
    variant = variant_info(**variant_kwargs)
    item = CartItem(cart_id=cart_id, variant_id=variant.variant_id, quantity=quantity, price_at_add=Decimal(price_at_add))
    return CartItemWithVariant(item=item, variant=variant)


class TestGetOrCreateCart:

    def test_identifier_required(self, cart_repository, memory_cache):
        use_case = GetOrCreateCartUseCase(cart_repository, memory_cache)

        with pytest.raises(ApplicationError) as exc_info:
            use_case.execute(GetCartDTO())

        assert exc_info.value.code == 'CART_IDENTIFIER_REQUIRED'
        assert exc_info.value.status_code == 400
        cart_repository.create_cart.assert_not_called()

    def test_creates_once_and_caches_once(self, cart_repository, memory_cache):
        cart_repository.find_by_user_id.return_value = None
        cart_repository.create_cart.return_value = Cart.create(user_id='user-1')
        use_case = GetOrCreateCartUseCase(cart_repository, memory_cache, ttl=60)

        result = use_case.execute(GetCartDTO(user_id='user-1'))

        assert result.data.user_id == 'user-1'
        cart_repository.create_cart.assert_called_once_with(user_id='user-1', session_id=None)
        assert memory_cache.sets == [('cart:userId:user-1', 60)]

    def test_cache_hit_skips_repository(self, cart_repository, memory_cache):
        memory_cache.store['cart:sessionId:sess-1'] = 'cached-cart'
        use_case = GetOrCreateCartUseCase(cart_repository, memory_cache)

        result = use_case.execute(GetCartDTO(session_id='sess-1'))

        assert result.data == 'cached-cart'
        cart_repository.find_by_session_id.assert_not_called()

    def test_existing_guest_cart_is_returned(self, cart_repository, memory_cache):
        cart = Cart.create(session_id='sess-1')
        cart_repository.find_by_session_id.return_value = cart
        use_case = GetOrCreateCartUseCase(cart_repository, memory_cache)

        result = use_case.execute(GetCartDTO(session_id='sess-1'))

        assert result.data.id == cart.id
        cart_repository.create_cart.assert_not_called()

    def test_both_identifiers_merge(self, cart_repository, memory_cache):
        memory_cache.store['cart:userId:user-1'] = 'stale'
        memory_cache.store['cart:sessionId:sess-1'] = 'stale'
        guest = Cart.create(session_id='sess-1')
        merged = Cart.create(user_id='user-1')
        memory_cache.store[f'cart:{merged.id}'] = 'stale'
        memory_cache.store[f'cart:{guest.id}'] = 'stale'
        cart_repository.find_by_session_id.return_value = guest
        cart_repository.merge_guest_cart.return_value = merged
        use_case = GetOrCreateCartUseCase(cart_repository, memory_cache)

        result = use_case.execute(GetCartDTO(user_id='user-1', session_id='sess-1'))

        cart_repository.merge_guest_cart.assert_called_once_with('user-1', 'sess-1')
        assert result.data.id == merged.id
        assert 'cart:sessionId:sess-1' not in memory_cache.store
        assert memory_cache.store['cart:userId:user-1'].id == merged.id
        assert f'cart:{merged.id}' not in memory_cache.store
        assert f'cart:{guest.id}' not in memory_cache.store


class TestAddItemToCart:

    def test_rejects_non_positive_quantity(self, cart_repository, memory_cache):
        use_case = AddItemToCartUseCase(cart_repository, memory_cache)

        with pytest.raises(ApplicationError) as exc_info:
            use_case.execute(AddCartItemDTO(cart_id=uuid4(), variant_id=uuid4(), quantity=0))

        assert exc_info.value.code == 'INVALID_QUANTITY'
        cart_repository.get_variant_info.assert_not_called()

    def test_missing_variant(self, cart_repository, memory_cache):
        cart_repository.get_variant_info.return_value = None
        use_case = AddItemToCartUseCase(cart_repository, memory_cache)

        with pytest.raises(ApplicationError) as exc_info:
            use_case.execute(AddCartItemDTO(cart_id=uuid4(), variant_id=uuid4(), quantity=1))

        assert exc_info.value.code == 'VARIANT_NOT_FOUND'
        assert exc_info.value.status_code == 404

    def test_unpublished_product(self, cart_repository, memory_cache):
        cart_repository.get_variant_info.return_value = variant_info(status='DRAFT')
        use_case = AddItemToCartUseCase(cart_repository, memory_cache)

        with pytest.raises(ApplicationError) as exc_info:
            use_case.execute(AddCartItemDTO(cart_id=uuid4(), variant_id=uuid4(), quantity=1))

        assert exc_info.value.code == 'VARIANT_UNAVAILABLE'
        cart_repository.add_or_update_item.assert_not_called()

    def test_insufficient_stock(self, cart_repository, memory_cache):
        cart_repository.get_variant_info.return_value = variant_info(stock=2)
        use_case = AddItemToCartUseCase(cart_repository, memory_cache)

        with pytest.raises(ApplicationError) as exc_info:
            use_case.execute(AddCartItemDTO(cart_id=uuid4(), variant_id=uuid4(), quantity=3))

        assert exc_info.value.code == 'INSUFFICIENT_STOCK'

    def test_quantity_already_in_cart_counts_against_stock(self, cart_repository, memory_cache):
        cart_id = uuid4()
        variant = variant_info(stock=5)
        cart_repository.get_variant_info.return_value = variant
        cart_repository.find_item.return_value = CartItem(
            cart_id=cart_id, variant_id=variant.variant_id, quantity=3, price_at_add=Decimal('100.00'),
        )
        use_case = AddItemToCartUseCase(cart_repository, memory_cache)

        with pytest.raises(ApplicationError) as exc_info:
            use_case.execute(AddCartItemDTO(cart_id=cart_id, variant_id=variant.variant_id, quantity=3))

        assert exc_info.value.code == 'INSUFFICIENT_STOCK'
        cart_repository.find_item.assert_called_once_with(cart_id, variant.variant_id)
        cart_repository.add_or_update_item.assert_not_called()

    def test_snapshots_sale_price_and_invalidates(self, cart_repository, memory_cache):
        cart_id = uuid4()
        variant = variant_info(price='100.00', sale_price='80.00')
        cart_repository.get_variant_info.return_value = variant
        cart_repository.add_or_update_item.return_value = CartItem(
            cart_id=cart_id, variant_id=variant.variant_id, quantity=2, price_at_add=Decimal('80.00'),
        )
        use_case = AddItemToCartUseCase(cart_repository, memory_cache)

        result = use_case.execute(AddCartItemDTO(cart_id=cart_id, variant_id=variant.variant_id, quantity=2))

        cart_repository.add_or_update_item.assert_called_once_with(
            cart_id=cart_id,
            variant_id=variant.variant_id,
            quantity=2,
            price_snapshot=Decimal('80.00'),
        )
        assert result.data.subtotal == Decimal('160.00')
        assert memory_cache.deleted == [f'cart:{cart_id}']


class TestUpdateCartItem:

    def test_negative_quantity(self, cart_repository, memory_cache):
        use_case = UpdateCartItemUseCase(cart_repository, memory_cache)

        with pytest.raises(ApplicationError) as exc_info:
            use_case.execute(UpdateCartItemDTO(item_id=uuid4(), quantity=-1))

        assert exc_info.value.code == 'INVALID_QUANTITY'

    def test_missing_item(self, cart_repository, memory_cache):
        cart_repository.get_cart_item_with_variant.return_value = None
        use_case = UpdateCartItemUseCase(cart_repository, memory_cache)

        with pytest.raises(ApplicationError) as exc_info:
            use_case.execute(UpdateCartItemDTO(item_id=uuid4(), quantity=1))

        assert exc_info.value.code == 'CART_ITEM_NOT_FOUND'
        assert exc_info.value.status_code == 404

    def test_zero_removes_item(self, cart_repository, memory_cache):
        cart_id = uuid4()
        entry = cart_entry(cart_id)
        cart_repository.get_cart_item_with_variant.return_value = entry
        use_case = UpdateCartItemUseCase(cart_repository, memory_cache)

        result = use_case.execute(UpdateCartItemDTO(item_id=entry.item.id, quantity=0))

        assert result.data is None
        cart_repository.remove_item.assert_called_once_with(entry.item.id)
        cart_repository.update_item_quantity.assert_not_called()
        assert memory_cache.deleted == [f'cart:{cart_id}']

    def test_stock_rechecked(self, cart_repository, memory_cache):
        entry = cart_entry(uuid4(), stock=3)
        cart_repository.get_cart_item_with_variant.return_value = entry
        use_case = UpdateCartItemUseCase(cart_repository, memory_cache)

        with pytest.raises(ApplicationError) as exc_info:
            use_case.execute(UpdateCartItemDTO(item_id=entry.item.id, quantity=4))

        assert exc_info.value.code == 'INSUFFICIENT_STOCK'

    def test_updates_quantity(self, cart_repository, memory_cache):
        cart_id = uuid4()
        entry = cart_entry(cart_id)
        cart_repository.get_cart_item_with_variant.return_value = entry
        cart_repository.update_item_quantity.return_value = CartItem(
            id=entry.item.id, cart_id=cart_id, variant_id=entry.item.variant_id, quantity=5, price_at_add=Decimal('100'),
        )
        use_case = UpdateCartItemUseCase(cart_repository, memory_cache)

        result = use_case.execute(UpdateCartItemDTO(item_id=entry.item.id, quantity=5))

        assert result.data.quantity == 5
        assert memory_cache.deleted == [f'cart:{cart_id}']


class TestRemoveCartItem:

    def test_missing_item_issues_no_delete(self, cart_repository, memory_cache):
        cart_repository.get_cart_item_with_variant.return_value = None
        use_case = RemoveCartItemUseCase(cart_repository, memory_cache)

        with pytest.raises(ApplicationError) as exc_info:
            use_case.execute(RemoveCartItemDTO(item_id=uuid4()))

        assert exc_info.value.code == 'CART_ITEM_NOT_FOUND'
        cart_repository.remove_item.assert_not_called()
        assert memory_cache.deleted == []

    def test_item_of_another_cart_is_not_found(self, cart_repository, memory_cache):
        entry = cart_entry(uuid4())
        cart_repository.get_cart_item_with_variant.return_value = entry
        use_case = RemoveCartItemUseCase(cart_repository, memory_cache)

        with pytest.raises(ApplicationError):
            use_case.execute(RemoveCartItemDTO(item_id=entry.item.id, cart_id=uuid4()))

        cart_repository.remove_item.assert_not_called()

    def test_removes_and_invalidates(self, cart_repository, memory_cache):
        cart_id = uuid4()
        entry = cart_entry(cart_id)
        cart_repository.get_cart_item_with_variant.return_value = entry
        use_case = RemoveCartItemUseCase(cart_repository, memory_cache)

        use_case.execute(RemoveCartItemDTO(item_id=entry.item.id, cart_id=cart_id))

        cart_repository.remove_item.assert_called_once_with(entry.item.id)
        assert memory_cache.deleted == [f'cart:{cart_id}']


class TestClearCart:

    def test_missing_cart(self, cart_repository, memory_cache):
        cart_repository.find_by_id.return_value = None
        use_case = ClearCartUseCase(cart_repository, memory_cache)

        with pytest.raises(ApplicationError) as exc_info:
            use_case.execute(uuid4())

        assert exc_info.value.code == 'CART_NOT_FOUND'
        cart_repository.clear_cart.assert_not_called()

    def test_existing_cart(self, cart_repository, memory_cache):
        cart = Cart.create(user_id='user-1')
        cart_repository.find_by_id.return_value = cart
        use_case = ClearCartUseCase(cart_repository, memory_cache)

        use_case.execute(cart.id)

        cart_repository.clear_cart.assert_called_once_with(cart.id)
        assert memory_cache.deleted == [f'cart:{cart.id}']


class TestClearCartAfterOrder:

    def test_identifier_required(self, cart_repository, memory_cache):
        with pytest.raises(ApplicationError) as exc_info:
            ClearCartAfterOrderUseCase(cart_repository, memory_cache).execute(GetCartDTO())
        assert exc_info.value.code == 'CART_IDENTIFIER_REQUIRED'

    def test_no_cart_is_noop(self, cart_repository, memory_cache):
        cart_repository.find_by_user_id.return_value = None

        ClearCartAfterOrderUseCase(cart_repository, memory_cache).execute(GetCartDTO(user_id='user-1'))

        cart_repository.clear_cart.assert_not_called()

    def test_clears_session_cart(self, cart_repository, memory_cache):
        cart = Cart.create(session_id='sess-1')
        cart_repository.find_by_session_id.return_value = cart

        ClearCartAfterOrderUseCase(cart_repository, memory_cache).execute(GetCartDTO(session_id='sess-1'))

        cart_repository.clear_cart.assert_called_once_with(cart.id)


class TestGetCartDetails:

    def test_clean_cart_is_cached(self, cart_repository, memory_cache):
        cart = Cart.create(user_id='user-1')
        cart_repository.get_cart_with_items.return_value = CartWithItems(
            cart=cart, items=[cart_entry(cart.id, quantity=2)],
        )
        use_case = GetCartDetailsUseCase(cart_repository, memory_cache, ttl=300)

        result = use_case.execute(cart.id)

        assert result.data.validation is None
        assert result.data.total_amount == Decimal('200.00')
        assert memory_cache.sets == [(f'cart:{cart.id}', 300)]

    def test_price_change_is_warning(self, cart_repository, memory_cache):
        cart = Cart.create(user_id='user-1')
        cart_repository.get_cart_with_items.return_value = CartWithItems(
            cart=cart, items=[cart_entry(cart.id, price_at_add='100.00', price='120.00')],
        )

        result = GetCartDetailsUseCase(cart_repository, memory_cache).execute(cart.id)

        validation = result.data.validation
        assert [issue.type for issue in validation.warnings[0].issues] == ['price']
        assert validation.errors == []
        assert len(memory_cache.sets) == 1

    def test_errors_are_not_cached(self, cart_repository, memory_cache):
        cart = Cart.create(user_id='user-1')
        out_of_stock = cart_entry(cart.id, quantity=5, stock=1)
        archived = cart_entry(cart.id, status='ARCHIVED', price_at_add='100.00', price='150.00')
        cart_repository.get_cart_with_items.return_value = CartWithItems(cart=cart, items=[out_of_stock, archived])

        result = GetCartDetailsUseCase(cart_repository, memory_cache).execute(cart.id)

        errors = result.data.validation.errors
        assert [error.item_id for error in errors] == [out_of_stock.item.id, archived.item.id]
        assert {issue.type for issue in errors[1].issues} == {'status', 'price'}
        assert memory_cache.sets == []

    def test_missing_cart(self, cart_repository, memory_cache):
        cart_repository.get_cart_with_items.return_value = None

        with pytest.raises(ApplicationError) as exc_info:
            GetCartDetailsUseCase(cart_repository, memory_cache).execute(uuid4())

        assert exc_info.value.code == 'CART_NOT_FOUND'
