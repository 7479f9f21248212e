"""
Orders API v1 URLs.
"""
from django.urls import path

from .views import (
    CartItemView,
    CartView,
    OrderDetailView,
    OrderListCreateView,
)

urlpatterns = [
    # Cart
    path('cart/', CartView.as_view(), name='cart'),
    path('cart/items/<uuid:item_id>/', CartItemView.as_view(), name='cart-item'),

    # Orders
    path('orders/', OrderListCreateView.as_view(), name='order-list-create'),
    path('orders/<uuid:order_id>/', OrderDetailView.as_view(), name='order-detail'),
]
