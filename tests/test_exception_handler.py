"""
Error envelope rendering.
"""
from unittest.mock import Mock

from rest_framework import exceptions

from apps.orders.domain.exceptions import InvalidQuantityError
from shared.application import ApplicationError, NotFoundError
from shared.interfaces import custom_exception_handler


def _handle(exc):
    return custom_exception_handler(exc, {'view': Mock()})


def test_application_error_keeps_its_status():
    response = _handle(ApplicationError("Cart is empty", "EMPTY_CART", 400))

    assert response.status_code == 400
    assert response.data == {'status': 400, 'message': "Cart is empty", 'data': None, 'errorCode': 'EMPTY_CART'}


def test_not_found():
    response = _handle(NotFoundError("Product", "abc"))

    assert response.status_code == 404
    assert response.data['errorCode'] == 'NOT_FOUND'
    assert 'abc' in response.data['message']


def test_domain_error_is_bad_request():
    response = _handle(InvalidQuantityError(0))

    assert response.status_code == 400
    assert response.data['errorCode'] == 'INVALID_QTY'


def test_validation_error_names_the_field():
    response = _handle(exceptions.ValidationError({'quantity': ['A valid integer is required.']}))

    assert response.status_code == 400
    assert response.data['errorCode'] == 'VALIDATION_ERROR'
    assert response.data['message'] == 'quantity: A valid integer is required.'
    assert response.data['data'] == {'quantity': ['A valid integer is required.']}


def test_not_authenticated_keeps_challenge():
    response = _handle(exceptions.NotAuthenticated())

    assert response.status_code == 401
    assert response.data['errorCode'] == 'UNAUTHORIZED'


def test_unexpected_error_is_hidden():
    response = _handle(RuntimeError("boom"))

    assert response.status_code == 500
    assert response.data['errorCode'] == 'INTERNAL_ERROR'
    assert 'boom' not in response.data['message']
