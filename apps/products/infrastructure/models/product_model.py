"""
Product Django ORM models.
"""
import uuid

from django.db import models

from ...domain.value_objects.product_status import ProductStatus


class ProductModel(models.Model):
    """Product model."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, db_index=True)
    slug = models.SlugField(max_length=255, unique=True)
    description = models.TextField(null=True, blank=True)
    brand = models.ForeignKey(
        'products.BrandModel',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='products',
    )
    category = models.ForeignKey(
        'products.CategoryModel',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='products',
    )
    default_image = models.URLField(max_length=500, null=True, blank=True)
    seo_meta_title = models.CharField(max_length=255, null=True, blank=True)
    seo_meta_desc = models.TextField(null=True, blank=True)
    status = models.CharField(
        max_length=20,
        choices=ProductStatus.choices(),
        default=ProductStatus.DRAFT.value,
        db_index=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['category', 'status']),
            models.Index(fields=['brand', 'status']),
        ]

    def __str__(self):
        return f"{self.name} ({self.slug})"


class ProductVariantModel(models.Model):
    """Product variant model: the unit that goes into a cart."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey(ProductModel, on_delete=models.CASCADE, related_name='variants')
    sku = models.CharField(max_length=100, unique=True, null=True, blank=True)
    attributes = models.JSONField(null=True, blank=True)
    price = models.DecimalField(max_digits=12, decimal_places=2)
    sale_price = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    stock_quantity = models.PositiveIntegerField(default=0)
    weight = models.DecimalField(max_digits=10, decimal_places=3, null=True, blank=True)
    barcode = models.CharField(max_length=100, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'product_variants'
        ordering = ['created_at']

    def __str__(self):
        return f"{self.product.name} [{self.sku or self.id}]"


class ProductImageModel(models.Model):
    """Product image model."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey(ProductModel, on_delete=models.CASCADE, related_name='images')
    variant = models.ForeignKey(
        ProductVariantModel,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='images',
    )
    url = models.URLField(max_length=500)
    alt_text = models.CharField(max_length=255, null=True, blank=True)
    sort_order = models.IntegerField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'product_images'
        ordering = ['sort_order', 'created_at']

    def __str__(self):
        return self.url
