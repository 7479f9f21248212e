"""
HTTP level tests through the DRF test client.
"""
from uuid import uuid4

import pytest

from apps.products.infrastructure.models import ProductModel
from apps.users.infrastructure.models import AccountModel

pytestmark = pytest.mark.django_db

GUEST = {'HTTP_X_SESSION_ID': 'guest-session-1'}


class TestHealth:

    def test_ping(self, api_client):
        response = api_client.get('/api/v1/ping/')

        assert response.status_code == 200
        assert response.data['message'] == 'pong'

    def test_ready(self, api_client):
        response = api_client.get('/api/v1/health/ready/')

        assert response.status_code == 200
        assert response.data['data']['checks']['database']['healthy'] is True


class TestCatalog:

    def test_list_envelope(self, api_client, make_variant):
        make_variant()
        make_variant()

        response = api_client.get('/api/v1/products/', {'limit': 1})

        assert response.status_code == 200
        assert response.data['status'] == 200
        page = response.data['data']
        assert page['total'] == 2
        assert page['total_pages'] == 2
        assert len(page['products']) == 1

    def test_bad_sort_field(self, api_client):
        response = api_client.get('/api/v1/products/', {'sortBy': 'price'})

        assert response.status_code == 400
        assert response.data['errorCode'] == 'VALIDATION_ERROR'

    def test_search_only_returns_published(self, api_client, make_variant):
        make_variant(price='99.00', product=ProductModel.objects.create(name='Oak desk', slug='oak-desk', status='PUBLISHED'))
        make_variant(product=ProductModel.objects.create(name='Pine desk', slug='pine-desk', status='DRAFT'))
        ProductModel.objects.create(name='Chair', slug='chair', status='PUBLISHED')

        response = api_client.get('/api/v1/products/search/', {'search': 'desk'})

        rows = response.data['data']['products']
        assert [row['slug'] for row in rows] == ['oak-desk']
        assert rows[0]['price'] == '99.00'
        assert rows[0]['variant_count'] == 1

    def test_by_slug(self, api_client, make_variant):
        variant = make_variant()

        response = api_client.get(f'/api/v1/products/{variant.product.slug}/')

        assert response.status_code == 200
        assert response.data['data']['variants'][0]['id'] == str(variant.id)

    def test_unknown_slug(self, api_client):
        response = api_client.get('/api/v1/products/nothing-here/')

        assert response.status_code == 404
        assert response.data['errorCode'] == 'NOT_FOUND'

    def test_writes_need_staff(self, authenticated_client):
        response = authenticated_client.post('/api/v1/categories/', {'name': 'Shoes', 'slug': 'shoes'}, format='json')

        assert response.status_code == 403
        assert response.data['errorCode'] == 'FORBIDDEN'

    def test_staff_creates_category(self, staff_client):
        response = staff_client.post('/api/v1/categories/', {'name': 'Shoes', 'slug': 'shoes'}, format='json')

        assert response.status_code == 201
        assert response.data['data']['slug'] == 'shoes'


class TestGuestCart:

    def test_requires_identity(self, api_client):
        response = api_client.get('/api/v1/cart/')

        assert response.status_code == 401
        assert response.data['errorCode'] == 'UNAUTHORIZED'

    def test_add_update_and_read(self, api_client, make_variant):
        variant = make_variant(price='25.00', stock=5)

        added = api_client.post('/api/v1/cart/', {'variant_id': str(variant.id), 'quantity': 2}, format='json', **GUEST)
        assert added.status_code == 201
        item_id = added.data['data']['id']

        updated = api_client.patch(f'/api/v1/cart/items/{item_id}/', {'quantity': 3}, format='json', **GUEST)
        assert updated.data['data']['quantity'] == 3

        cart = api_client.get('/api/v1/cart/', **GUEST).data['data']
        assert cart['session_id'] == 'guest-session-1'
        assert cart['total_amount'] == '75.00'
        assert cart['validation'] is None

    def test_over_stock(self, api_client, make_variant):
        variant = make_variant(stock=1)

        response = api_client.post('/api/v1/cart/', {'variant_id': str(variant.id), 'quantity': 2}, format='json', **GUEST)

        assert response.status_code == 400
        assert response.data['errorCode'] == 'INSUFFICIENT_STOCK'

    def test_repeated_adds_cannot_exceed_stock(self, api_client, make_variant):
        variant = make_variant(stock=5)
        payload = {'variant_id': str(variant.id), 'quantity': 3}

        first = api_client.post('/api/v1/cart/', payload, format='json', **GUEST)
        second = api_client.post('/api/v1/cart/', payload, format='json', **GUEST)

        assert first.status_code == 201
        assert second.status_code == 400
        assert second.data['errorCode'] == 'INSUFFICIENT_STOCK'
        assert api_client.get('/api/v1/cart/', **GUEST).data['data']['items'][0]['quantity'] == 3

    def test_zero_quantity_removes(self, api_client, make_variant):
        variant = make_variant()
        item_id = api_client.post(
            '/api/v1/cart/', {'variant_id': str(variant.id)}, format='json', **GUEST,
        ).data['data']['id']

        response = api_client.patch(f'/api/v1/cart/items/{item_id}/', {'quantity': 0}, format='json', **GUEST)

        assert response.data['data'] is None
        assert api_client.get('/api/v1/cart/', **GUEST).data['data']['items'] == []

    def test_other_session_cannot_touch_item(self, api_client, make_variant):
        variant = make_variant()
        item_id = api_client.post(
            '/api/v1/cart/', {'variant_id': str(variant.id)}, format='json', **GUEST,
        ).data['data']['id']

        response = api_client.delete(f'/api/v1/cart/items/{item_id}/', HTTP_X_SESSION_ID='someone-else')

        assert response.status_code == 404

    def test_sign_in_merges_guest_cart(self, api_client, user, make_variant):
        variant = make_variant()
        api_client.post('/api/v1/cart/', {'variant_id': str(variant.id)}, format='json', **GUEST)

        api_client.force_authenticate(user=user)
        cart = api_client.get('/api/v1/cart/', **GUEST).data['data']

        assert cart['session_id'] is None
        assert cart['items'][0]['variant_id'] == str(variant.id)

    def test_sign_in_merge_refreshes_cached_user_cart(self, api_client, user, make_variant):
        owned, guest_pick = make_variant(), make_variant()
        api_client.force_authenticate(user=user)
        api_client.post('/api/v1/cart/', {'variant_id': str(owned.id)}, format='json')
        assert len(api_client.get('/api/v1/cart/').data['data']['items']) == 1

        api_client.force_authenticate(user=None)
        api_client.post('/api/v1/cart/', {'variant_id': str(guest_pick.id)}, format='json', **GUEST)

        api_client.force_authenticate(user=user)
        cart = api_client.get('/api/v1/cart/', **GUEST).data['data']

        assert {item['variant_id'] for item in cart['items']} == {str(owned.id), str(guest_pick.id)}


class TestOrders:

    def test_requires_sign_in(self, api_client):
        assert api_client.get('/api/v1/orders/').status_code == 401

    def test_place_order_empties_cart(self, authenticated_client, make_variant):
        variant = make_variant(price='10.00', stock=5)
        authenticated_client.post('/api/v1/cart/', {'variant_id': str(variant.id), 'quantity': 2}, format='json')

        response = authenticated_client.post('/api/v1/orders/')

        assert response.status_code == 201
        order = response.data['data']
        assert order['total_amount'] == '20.00'
        assert order['item_count'] == 2
        assert authenticated_client.get('/api/v1/cart/').data['data']['items'] == []
        listed = authenticated_client.get('/api/v1/orders/').data['data']
        assert [row['id'] for row in listed] == [order['id']]

    def test_empty_cart(self, authenticated_client):
        response = authenticated_client.post('/api/v1/orders/')

        assert response.status_code == 400
        assert response.data['errorCode'] == 'EMPTY_CART'

    def test_unknown_order(self, authenticated_client):
        response = authenticated_client.get(f'/api/v1/orders/{uuid4()}/')

        assert response.status_code == 404
        assert response.data['errorCode'] == 'ORDER_NOT_FOUND'


class TestWishlist:

    def test_requires_sign_in(self, api_client):
        assert api_client.get('/api/v1/wishlist/').status_code == 401

    def test_add_list_and_duplicate(self, authenticated_client, make_variant):
        product_id = str(make_variant(price='15.00').product_id)

        first = authenticated_client.post('/api/v1/wishlist/', {'product_id': product_id}, format='json')
        again = authenticated_client.post('/api/v1/wishlist/', {'product_id': product_id}, format='json')
        listed = authenticated_client.get('/api/v1/wishlist/').data['data']

        assert first.status_code == 201
        assert again.status_code == 400
        assert again.data['errorCode'] == 'DUPLICATE_ITEM'
        assert listed[0]['price'] == '15.00'

    def test_unknown_product(self, authenticated_client):
        response = authenticated_client.post('/api/v1/wishlist/', {'product_id': str(uuid4())}, format='json')

        assert response.status_code == 404
        assert response.data['errorCode'] == 'PRODUCT_NOT_FOUND'


class TestUserAccounts:

    def test_forbidden_for_customers(self, authenticated_client, user):
        response = authenticated_client.get(f'/api/v1/admin/users/{user.pk}/accounts/')

        assert response.status_code == 403

    def test_staff_sees_accounts(self, staff_client, user):
        AccountModel.objects.create(user_id=str(user.pk), provider_id='credential', account_id=str(user.pk))

        response = staff_client.get(f'/api/v1/admin/users/{user.pk}/accounts/')

        assert response.status_code == 200
        assert response.data['data'][0]['provider_id'] == 'credential'
