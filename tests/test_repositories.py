"""
ORM repository behaviour against the test database.
"""
from decimal import Decimal

import pytest

from apps.orders.infrastructure.models import CartItemModel, CartModel
from apps.orders.infrastructure.repositories import DjangoCartRepository
from apps.products.infrastructure.models import CategoryModel
from apps.products.infrastructure.repositories import DjangoCategoryRepository
from apps.users.domain.exceptions import DuplicateWishlistItemError
from apps.users.infrastructure.repositories import DjangoWishlistRepository

pytestmark = pytest.mark.django_db


@pytest.fixture
def carts():
    return DjangoCartRepository()


def _add(cart, variant, quantity, price):
    return CartItemModel.objects.create(cart_id=cart.id, variant=variant, quantity=quantity, price_at_add=Decimal(price))


class TestCartMerge:

    def test_overlapping_items_are_summed_at_lower_price(self, carts, make_variant):
        shared_variant = make_variant(price='50.00')
        guest_only = make_variant(price='20.00')
        guest = carts.create_cart(session_id='sess-1')
        owned = carts.create_cart(user_id='u-1')
        _add(guest, shared_variant, 2, '45.00')
        _add(guest, guest_only, 1, '20.00')
        _add(owned, shared_variant, 3, '50.00')

        merged = carts.merge_guest_cart('u-1', 'sess-1')

        assert merged.id == owned.id
        assert not CartModel.objects.filter(session_id='sess-1').exists()
        items = {item.variant_id: item for item in CartItemModel.objects.filter(cart_id=owned.id)}
        assert items[shared_variant.id].quantity == 5
        assert items[shared_variant.id].price_at_add == Decimal('45.00')
        assert items[guest_only.id].quantity == 1

    def test_guest_cart_is_reassigned_when_user_has_none(self, carts, make_variant):
        guest = carts.create_cart(session_id='sess-2')
        _add(guest, make_variant(), 1, '100.00')

        merged = carts.merge_guest_cart('u-2', 'sess-2')

        assert merged.id == guest.id
        assert merged.user_id == 'u-2'
        assert merged.session_id is None
        stored = CartModel.objects.get(id=guest.id)
        assert stored.user_id == 'u-2'
        assert stored.session_id is None

    def test_empty_guest_cart_leaves_user_cart_alone(self, carts, make_variant):
        carts.create_cart(session_id='sess-3')
        owned = carts.create_cart(user_id='u-3')
        _add(owned, make_variant(), 2, '100.00')

        merged = carts.merge_guest_cart('u-3', 'sess-3')

        assert merged.id == owned.id
        assert CartItemModel.objects.get(cart_id=owned.id).quantity == 2
        assert not CartModel.objects.filter(session_id='sess-3').exists()

    def test_creates_user_cart_when_nothing_exists(self, carts):
        merged = carts.merge_guest_cart('u-4', 'sess-missing')

        assert merged.user_id == 'u-4'
        assert CartModel.objects.filter(user_id='u-4').count() == 1


class TestCartItems:

    def test_find_item_returns_the_variant_line(self, carts, make_variant):
        variant = make_variant()
        cart = carts.create_cart(user_id='u-9')
        carts.add_or_update_item(cart.id, variant.id, 3, Decimal('100.00'))

        assert carts.find_item(cart.id, variant.id).quantity == 3
        assert carts.find_item(cart.id, make_variant().id) is None

    def test_add_twice_increments_and_keeps_latest_price(self, carts, make_variant):
        variant = make_variant(price='30.00')
        cart = carts.create_cart(user_id='u-5')

        carts.add_or_update_item(cart.id, variant.id, 1, Decimal('30.00'))
        item = carts.add_or_update_item(cart.id, variant.id, 2, Decimal('28.00'))

        assert item.quantity == 3
        assert item.price_at_add == Decimal('28.00')
        assert CartItemModel.objects.filter(cart_id=cart.id).count() == 1

    def test_duplicate_create_returns_existing_cart(self, carts):
        first = carts.create_cart(session_id='sess-6')

        second = carts.create_cart(session_id='sess-6')

        assert second.id == first.id

    def test_cart_with_items_reports_variant_state(self, carts, make_variant):
        variant = make_variant(price='10.00', sale_price='8.00', stock=4)
        cart = carts.create_cart(session_id='sess-7')
        carts.add_or_update_item(cart.id, variant.id, 2, Decimal('8.00'))

        details = carts.get_cart_with_items(session_id='sess-7')

        line = details.items[0]
        assert line.item.quantity == 2
        assert line.variant.stock_quantity == 4
        assert line.variant.sale_price == Decimal('8.00')
        assert line.variant.product_status == 'PUBLISHED'

    def test_lookup_without_identity(self, carts):
        assert carts.get_cart_with_items() is None


class TestWishlistRepository:

    def test_duplicate_entry_is_rejected(self, make_variant):
        product_id = make_variant().product_id
        wishlist = DjangoWishlistRepository()
        wishlist.add_item('u-8', product_id)

        with pytest.raises(DuplicateWishlistItemError) as exc_info:
            wishlist.add_item('u-8', product_id)

        assert exc_info.value.code == 'DUPLICATE_ITEM'

    def test_rows_priced_from_first_variant(self, make_variant):
        variant = make_variant(price='12.50')
        wishlist = DjangoWishlistRepository()
        wishlist.add_item('u-9', variant.product_id)

        entries = wishlist.get_user_wishlist('u-9')

        assert entries[0].product.price == Decimal('12.50')
        assert entries[0].product.sale_price is None

    def test_remove_missing_entry_is_noop(self, make_variant):
        wishlist = DjangoWishlistRepository()

        wishlist.remove_item('u-10', make_variant().product_id)

        assert wishlist.get_user_wishlist('u-10') == []


def test_deleting_category_promotes_children():
    parent = CategoryModel.objects.create(name='Shoes', slug='shoes')
    child = CategoryModel.objects.create(name='Boots', slug='boots', parent=parent)

    DjangoCategoryRepository().delete(parent.id)

    child.refresh_from_db()
    assert child.parent_id is None
    assert not CategoryModel.objects.filter(id=parent.id).exists()
