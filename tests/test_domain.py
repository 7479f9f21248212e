"""
Entity and value object rules.
"""
from decimal import Decimal
from uuid import uuid4

import pytest

from apps.orders.domain.entities import Cart, CartItem, Order, OrderItem
from apps.products.domain.entities import Category, Product
from apps.products.domain.value_objects import Price, ProductStatus, Slug
from shared.domain import DomainError


class TestCart:

    def test_user_cart(self):
        cart = Cart.create(user_id='user-1')
        assert cart.user_id == 'user-1'
        assert cart.session_id is None
        assert not cart.is_guest

    def test_guest_cart(self):
        cart = Cart.create(session_id='sess-1')
        assert cart.is_guest

    @pytest.mark.parametrize('user_id, session_id', [(None, None), ('user-1', 'sess-1'), ('', '')])
    def test_exactly_one_owner(self, user_id, session_id):
        with pytest.raises(DomainError) as exc_info:
            Cart.create(user_id=user_id, session_id=session_id)
        assert exc_info.value.code == 'INVALID_CART_OWNER'

    def test_assign_to_user_drops_session(self):
        cart = Cart.create(session_id='sess-1')
        cart.assign_to_user('user-1')
        assert cart.user_id == 'user-1'
        assert cart.session_id is None


class TestCartItem:

    @pytest.mark.parametrize('quantity', [0, -1, 1.5, True])
    def test_quantity_must_be_positive_integer(self, quantity):
        with pytest.raises(DomainError) as exc_info:
            CartItem(cart_id=uuid4(), variant_id=uuid4(), quantity=quantity, price_at_add=Decimal('10'))
        assert exc_info.value.code == 'INVALID_QTY'

    def test_negative_price_rejected(self):
        with pytest.raises(DomainError) as exc_info:
            CartItem(cart_id=uuid4(), variant_id=uuid4(), quantity=1, price_at_add=Decimal('-1'))
        assert exc_info.value.code == 'INVALID_PRICE'

    def test_subtotal(self):
        item = CartItem(cart_id=uuid4(), variant_id=uuid4(), quantity=3, price_at_add='19.99')
        assert item.subtotal == Decimal('59.97')


class TestOrder:

    def test_totals_and_item_links(self):
        items = [
            OrderItem(variant_id=uuid4(), quantity=2, unit_price=Decimal('10.00')),
            OrderItem(variant_id=uuid4(), quantity=1, unit_price=Decimal('5.50')),
        ]
        order = Order.create(user_id='user-1', items=items)

        assert order.total_amount == Decimal('25.50')
        assert order.item_count == 3
        assert all(item.order_id == order.id for item in order.items)


class TestPrice:

    def test_negative_rejected(self):
        with pytest.raises(DomainError):
            Price(Decimal('-0.01'))

    @pytest.mark.parametrize('snapshot, current, expected', [
        ('100', '100.50', False),
        ('100', '101.50', True),
        ('200000', '201000', False),
        ('200000', '201001', True),
    ])
    def test_significant_difference(self, snapshot, current, expected):
        assert Price(snapshot).has_significant_difference(Price(current)) is expected


class TestSlug:

    def test_valid(self):
        assert str(Slug('summer-sale_2024')) == 'summer-sale_2024'

    @pytest.mark.parametrize('value', ['Upper', 'with space', 'ümlaut', ''])
    def test_invalid(self, value):
        with pytest.raises(DomainError) as exc_info:
            Slug(value)
        assert exc_info.value.code == 'INVALID_SLUG'


class TestProduct:

    def test_archived_cannot_be_published_directly(self):
        product = Product.create(name='Lamp', slug='lamp', status=ProductStatus.ARCHIVED)
        with pytest.raises(DomainError) as exc_info:
            product.update_status(ProductStatus.PUBLISHED)
        assert exc_info.value.code == 'CANNOT_PUBLISH_ARCHIVED'

        product.update_status(ProductStatus.DRAFT)
        product.publish()
        assert product.is_available


class TestCategory:

    def test_descendant_walk(self):
        root = Category.create(name='Root', slug='root')
        child = Category.create(name='Child', slug='child', parent_id=root.id)
        grandchild = Category.create(name='Grandchild', slug='grandchild', parent_id=child.id)
        everything = [root, child, grandchild]

        assert grandchild.is_descendant_of(root.id, everything)
        assert not root.is_descendant_of(grandchild.id, everything)
        assert not root.can_be_parent_of(root.id)
