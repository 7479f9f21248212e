"""
Wishlist Django ORM model.
"""
import uuid

from django.db import models


class WishlistItemModel(models.Model):
    """Wishlist item model."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_id = models.CharField(max_length=64, db_index=True)
    product = models.ForeignKey(
        'products.ProductModel',
        on_delete=models.CASCADE,
        related_name='wishlist_items'
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'wishlist_items'
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(fields=['user_id', 'product'], name='wishlist_unique_user_product'),
        ]

    def __str__(self):
        return f"{self.user_id} - {self.product_id}"
