"""
Cart serializers.
"""
from rest_framework import serializers


class CartSerializer(serializers.Serializer):
    """Serializer for cart output."""
    id = serializers.UUIDField(read_only=True)
    user_id = serializers.CharField(read_only=True, allow_null=True)
    session_id = serializers.CharField(read_only=True, allow_null=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class CartItemSerializer(serializers.Serializer):
    """Serializer for cart item output."""
    id = serializers.UUIDField(read_only=True)
    cart_id = serializers.UUIDField(read_only=True)
    variant_id = serializers.UUIDField(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    price_at_add = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    created_at = serializers.DateTimeField(read_only=True)


class ValidationIssueSerializer(serializers.Serializer):
    type = serializers.CharField(read_only=True)
    message = serializers.CharField(read_only=True)


class CartValidationIssueSerializer(serializers.Serializer):
    item_id = serializers.UUIDField(read_only=True)
    variant_id = serializers.UUIDField(read_only=True)
    issues = ValidationIssueSerializer(many=True, read_only=True)


class CartValidationSerializer(serializers.Serializer):
    warnings = CartValidationIssueSerializer(many=True, read_only=True)
    errors = CartValidationIssueSerializer(many=True, read_only=True)


class CartWithItemsSerializer(CartSerializer):
    """Cart with its items and read-time validation report."""
    items = CartItemSerializer(many=True, read_only=True)
    total_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    validation = CartValidationSerializer(read_only=True, allow_null=True)


class CartItemCreateSerializer(serializers.Serializer):
    """Serializer for adding item to cart."""
    variant_id = serializers.UUIDField()
    quantity = serializers.IntegerField(default=1)


class CartItemUpdateSerializer(serializers.Serializer):
    """Serializer for updating cart item. Zero removes the item."""
    quantity = serializers.IntegerField()
