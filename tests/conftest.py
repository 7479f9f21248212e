"""
Pytest configuration and fixtures.
"""
from decimal import Decimal

import pytest
from django.core.cache import cache

from shared.application.cache import CacheService


class InMemoryCache(CacheService):
    """Dict backed cache that records every call for assertions."""

    def __init__(self):
        self.store = {}
        self.sets = []
        self.deleted = []

    def get(self, key):
        return self.store.get(key)

    def set(self, key, value, ttl=60):
        self.sets.append((key, ttl))
        self.store[key] = value

    def delete(self, key):
        self.deleted.append(key)
        self.store.pop(key, None)

    def delete_multiple(self, keys):
        for key in keys:
            self.delete(key)


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def memory_cache():
    return InMemoryCache()


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(
        username='testuser',
        email='test@example.com',
        password='testpass123',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Create an authenticated API client."""
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture
def staff_client(django_user_model):
    from rest_framework.test import APIClient
    staff = django_user_model.objects.create_user(
        username='staff',
        email='staff@example.com',
        password='staffpass123',
        is_staff=True,
    )
    client = APIClient()
    client.force_authenticate(user=staff)
    return client


@pytest.fixture
def make_variant(db):
    """Create a product with one variant and return the variant model."""
    from apps.products.infrastructure.models import ProductModel, ProductVariantModel

    counter = {'n': 0}

    def _make(price='100.00', sale_price=None, stock=10, status='PUBLISHED', product=None):
        if product is None:
            counter['n'] += 1
            product = ProductModel.objects.create(
                name=f"Product {counter['n']}",
                slug=f"product-{counter['n']}",
                status=status,
            )
        return ProductVariantModel.objects.create(
            product=product,
            price=Decimal(price),
            sale_price=Decimal(sale_price) if sale_price is not None else None,
            stock_quantity=stock,
        )

    return _make
