from .cart_validation import validate_cart_items

__all__ = ['validate_cart_items']
