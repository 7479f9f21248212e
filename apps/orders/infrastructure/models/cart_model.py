"""
Cart Django ORM models.
"""
import uuid

from django.db import models
from django.db.models import Q


class CartModel(models.Model):
    """Cart model. Owned by exactly one of a user or a guest session."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_id = models.CharField(max_length=64, unique=True, null=True, blank=True)
    session_id = models.CharField(max_length=128, unique=True, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'carts'
        constraints = [
            models.CheckConstraint(
                condition=(
                    Q(user_id__isnull=False, session_id__isnull=True)
                    | Q(user_id__isnull=True, session_id__isnull=False)
                ),
                name='cart_single_owner',
            ),
        ]

    def __str__(self):
        if self.user_id:
            return f"Cart for user {self.user_id}"
        return f"Guest cart {self.session_id}"


class CartItemModel(models.Model):
    """Cart item model."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    cart = models.ForeignKey(CartModel, on_delete=models.CASCADE, related_name='items')
    variant = models.ForeignKey(
        'products.ProductVariantModel',
        on_delete=models.CASCADE,
        related_name='cart_items',
    )
    quantity = models.PositiveIntegerField(default=1)
    price_at_add = models.DecimalField(max_digits=12, decimal_places=2)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'cart_items'
        ordering = ['created_at']
        constraints = [
            models.UniqueConstraint(fields=['cart', 'variant'], name='cart_item_unique_variant'),
        ]

    def __str__(self):
        return f"{self.variant_id} x {self.quantity}"
