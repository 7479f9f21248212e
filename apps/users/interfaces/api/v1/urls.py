"""
Users API v1 URLs.
"""
from django.urls import path

from .views import UserAccountsView, WishlistItemView, WishlistView

urlpatterns = [
    # Wishlist
    path('wishlist/', WishlistView.as_view(), name='wishlist'),
    path('wishlist/<uuid:product_id>/', WishlistItemView.as_view(), name='wishlist-item'),

    # Admin
    path('admin/users/<int:user_id>/accounts/', UserAccountsView.as_view(), name='admin-user-accounts'),
]
