"""
Order serializers.
"""
from rest_framework import serializers

from ...domain.value_objects.order_status import OrderStatus


class OrderLineSerializer(serializers.Serializer):
    """One variant line, priced at what the cart captured."""
    id = serializers.UUIDField(read_only=True)
    variant_id = serializers.UUIDField(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)


class OrderSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    user_id = serializers.CharField(read_only=True)
    status = serializers.ChoiceField(choices=OrderStatus.choices(), read_only=True)
    items = OrderLineSerializer(many=True, read_only=True)
    item_count = serializers.IntegerField(read_only=True)
    total_amount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
