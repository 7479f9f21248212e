"""
Wishlist serializers.
"""
from rest_framework import serializers


class WishlistItemSerializer(serializers.Serializer):
    """Serializer for wishlist entry output."""
    id = serializers.UUIDField(read_only=True)
    product_id = serializers.UUIDField(read_only=True)
    product_name = serializers.CharField(read_only=True)
    product_slug = serializers.CharField(read_only=True)
    product_image = serializers.CharField(read_only=True, allow_null=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    sale_price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True, allow_null=True)
    created_at = serializers.DateTimeField(read_only=True)


class WishlistAddSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
