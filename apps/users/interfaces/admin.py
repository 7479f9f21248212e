"""
Users admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models import AccountModel, WishlistItemModel


@admin.register(WishlistItemModel)
class WishlistItemAdmin(admin.ModelAdmin):
    list_display = ('user_id', 'product', 'created_at')
    search_fields = ('user_id', 'product__name')
    ordering = ('-created_at',)
    readonly_fields = ('id', 'created_at')


@admin.register(AccountModel)
class AccountAdmin(admin.ModelAdmin):
    """Admin configuration for linked sign-in accounts."""
    list_display = ('user_id', 'provider_id', 'account_id', 'created_at')
    list_filter = ('provider_id',)
    search_fields = ('user_id', 'account_id')
    ordering = ('-created_at',)
    readonly_fields = ('id', 'created_at', 'updated_at')
