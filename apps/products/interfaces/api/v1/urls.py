"""
Products API v1 URLs.
"""
from django.urls import path

from .views import (
    BrandListView,
    CategoryBySlugView,
    CategoryDetailView,
    CategoryListCreateView,
    ProductBySlugView,
    ProductDetailView,
    ProductListCreateView,
    ProductSearchView,
)

urlpatterns = [
    # Products
    path('products/', ProductListCreateView.as_view(), name='product-list-create'),
    path('products/search/', ProductSearchView.as_view(), name='product-search'),
    path('products/<uuid:product_id>/', ProductDetailView.as_view(), name='product-detail'),
    path('products/<slug:slug>/', ProductBySlugView.as_view(), name='product-by-slug'),

    # Categories
    path('categories/', CategoryListCreateView.as_view(), name='category-list-create'),
    path('categories/<uuid:category_id>/', CategoryDetailView.as_view(), name='category-detail'),
    path('categories/slug/<slug:slug>/', CategoryBySlugView.as_view(), name='category-by-slug'),

    # Brands
    path('brands/', BrandListView.as_view(), name='brand-list'),
]
