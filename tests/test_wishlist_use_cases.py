"""
Wishlist and account use cases.
"""
from decimal import Decimal
from unittest.mock import Mock
from uuid import uuid4

import pytest

from apps.products.domain.entities import Product
from apps.products.domain.repositories.product_repository import ProductRepository
from apps.users.application.dtos import WishlistCommandDTO
from apps.users.application.use_cases import (
    AddToWishlistUseCase,
    GetUserAccountsUseCase,
    GetUserWishlistUseCase,
    RemoveFromWishlistUseCase,
)
from apps.users.domain.entities import Account, WishlistItem
from apps.users.domain.repositories.account_repository import AccountRepository
from apps.users.domain.repositories.wishlist_repository import (
    WishlistEntry,
    WishlistProduct,
    WishlistRepository,
)
from shared.application import ApplicationError


@pytest.fixture
def wishlist_repository():
    return Mock(spec=WishlistRepository)


@pytest.fixture
def product_repository():
    return Mock(spec=ProductRepository)


def test_add_existing_product(wishlist_repository, product_repository):
    product = Product.create(name='Lamp', slug='lamp')
    product_repository.find_by_id.return_value = product

    AddToWishlistUseCase(wishlist_repository, product_repository).execute(
        WishlistCommandDTO(user_id='user-1', product_id=product.id)
    )

    wishlist_repository.add_item.assert_called_once_with('user-1', product.id)


def test_add_unknown_product(wishlist_repository, product_repository):
    product_repository.find_by_id.return_value = None

    with pytest.raises(ApplicationError) as exc_info:
        AddToWishlistUseCase(wishlist_repository, product_repository).execute(
            WishlistCommandDTO(user_id='user-1', product_id=uuid4())
        )

    assert exc_info.value.code == 'PRODUCT_NOT_FOUND'
    assert exc_info.value.status_code == 404
    wishlist_repository.add_item.assert_not_called()


def test_remove_delegates(wishlist_repository):
    product_id = uuid4()

    result = RemoveFromWishlistUseCase(wishlist_repository).execute(
        WishlistCommandDTO(user_id='user-1', product_id=product_id)
    )

    assert result.data is None
    wishlist_repository.remove_item.assert_called_once_with('user-1', product_id)


def test_wishlist_rows(wishlist_repository):
    priced = WishlistProduct(
        id=uuid4(), name='Lamp', slug='lamp', default_image=None,
        price=Decimal('40.00'), sale_price=Decimal('35.00'),
    )
    unpriced = WishlistProduct(
        id=uuid4(), name='Rug', slug='rug', default_image='rug.jpg',
        price=None, sale_price=None,
    )
    wishlist_repository.get_user_wishlist.return_value = [
        WishlistEntry(item=WishlistItem.create('user-1', priced.id), product=priced),
        WishlistEntry(item=WishlistItem.create('user-1', unpriced.id), product=unpriced),
    ]

    rows = GetUserWishlistUseCase(wishlist_repository).execute('user-1').data

    assert [row.product_slug for row in rows] == ['lamp', 'rug']
    assert rows[0].sale_price == Decimal('35.00')
    assert rows[1].price == Decimal('0')
    assert rows[1].product_image == 'rug.jpg'


def test_user_accounts():
    account_repository = Mock(spec=AccountRepository)
    account_repository.find_by_user_id.return_value = [
        Account(user_id='7', provider_id='credential', account_id='7'),
        Account(user_id='7', provider_id='google', account_id='g-123'),
    ]

    accounts = GetUserAccountsUseCase(account_repository).execute('7').data

    account_repository.find_by_user_id.assert_called_once_with('7')
    assert [a.provider_id for a in accounts] == ['credential', 'google']
