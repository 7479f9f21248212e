"""
Custom exception handler for DRF.
"""
import logging

from rest_framework import exceptions, status
from rest_framework.views import exception_handler

from shared.application.exceptions import ApplicationError
from shared.domain.exceptions import DomainError
from .responses import error_response

logger = logging.getLogger(__name__)

DRF_ERROR_CODES = {
    exceptions.ValidationError: 'VALIDATION_ERROR',
    exceptions.ParseError: 'VALIDATION_ERROR',
    exceptions.NotAuthenticated: 'UNAUTHORIZED',
    exceptions.AuthenticationFailed: 'UNAUTHORIZED',
    exceptions.PermissionDenied: 'FORBIDDEN',
    exceptions.NotFound: 'NOT_FOUND',
    exceptions.MethodNotAllowed: 'METHOD_NOT_ALLOWED',
    exceptions.Throttled: 'TOO_MANY_REQUESTS',
}


def _first_message(detail) -> str:
    """Pull the first human readable message out of a DRF error detail."""
    if isinstance(detail, dict):
        field, value = next(iter(detail.items()))
        message = _first_message(value)
        return message if field == 'non_field_errors' else f"{field}: {message}"
    if isinstance(detail, list) and detail:
        return _first_message(detail[0])
    return str(detail)


def _drf_error_code(exc) -> str:
    for exc_class, code in DRF_ERROR_CODES.items():
        if isinstance(exc, exc_class):
            return code
    return 'ERROR'


def custom_exception_handler(exc, context):
    """Render every failure with the response envelope."""
    if isinstance(exc, ApplicationError):
        return error_response(exc.message, exc.code, exc.status_code)

    if isinstance(exc, DomainError):
        return error_response(exc.message, exc.code, status.HTTP_400_BAD_REQUEST)

    # Let DRF translate its own exceptions and Django's Http404/PermissionDenied
    response = exception_handler(exc, context)
    if response is not None:
        detail = getattr(exc, 'detail', response.data)
        error = error_response(
            _first_message(detail),
            _drf_error_code(exc),
            response.status_code,
            data=response.data if isinstance(exc, exceptions.ValidationError) else None,
        )
        for header in ('WWW-Authenticate', 'Retry-After', 'Allow'):
            if header in response:
                error[header] = response[header]
        return error

    view = context.get('view')
    logger.exception(f"Unhandled error in {view.__class__.__name__ if view else 'unknown view'}: {exc}")
    return error_response(
        "An internal server error occurred",
        'INTERNAL_ERROR',
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
