"""
Products admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models import (
    BrandModel,
    CategoryModel,
    ProductImageModel,
    ProductModel,
    ProductVariantModel,
)


class ProductVariantInline(admin.TabularInline):
    model = ProductVariantModel
    extra = 0


class ProductImageInline(admin.TabularInline):
    model = ProductImageModel
    extra = 0


@admin.register(ProductModel)
class ProductAdmin(admin.ModelAdmin):
    """Admin configuration for Product model."""
    list_display = ('name', 'slug', 'status', 'brand', 'category', 'created_at')
    list_filter = ('status', 'brand', 'category')
    search_fields = ('name', 'slug', 'description')
    ordering = ('-created_at',)
    readonly_fields = ('id', 'created_at', 'updated_at')
    inlines = [ProductVariantInline, ProductImageInline]


@admin.register(CategoryModel)
class CategoryAdmin(admin.ModelAdmin):
    """Admin configuration for Category model."""
    list_display = ('name', 'slug', 'parent', 'active', 'created_at')
    list_filter = ('active', 'parent')
    search_fields = ('name', 'slug', 'description')
    ordering = ('name',)
    readonly_fields = ('id', 'created_at', 'updated_at')


@admin.register(BrandModel)
class BrandAdmin(admin.ModelAdmin):
    list_display = ('name', 'slug', 'active', 'created_at')
    list_filter = ('active',)
    search_fields = ('name', 'slug')
    ordering = ('name',)
    readonly_fields = ('id', 'created_at', 'updated_at')
