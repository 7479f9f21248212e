# Shared interfaces module
from .exception_handlers import custom_exception_handler
from .responses import error_response, success_response

__all__ = ['custom_exception_handler', 'error_response', 'success_response']
