"""
Product serializers.
"""
from rest_framework import serializers

from ...domain.value_objects.product_status import ProductStatus


class RelationSummarySerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    slug = serializers.CharField(read_only=True)


class ProductImageSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    variant_id = serializers.UUIDField(read_only=True, allow_null=True)
    url = serializers.CharField(read_only=True)
    alt_text = serializers.CharField(read_only=True, allow_null=True)
    sort_order = serializers.IntegerField(read_only=True, allow_null=True)


class ProductVariantSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    sku = serializers.CharField(read_only=True, allow_null=True)
    attributes = serializers.JSONField(read_only=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    sale_price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True, allow_null=True)
    stock_quantity = serializers.IntegerField(read_only=True)
    weight = serializers.DecimalField(max_digits=10, decimal_places=3, read_only=True, allow_null=True)
    barcode = serializers.CharField(read_only=True, allow_null=True)
    images = ProductImageSerializer(many=True, read_only=True)


class ProductSerializer(serializers.Serializer):
    """Serializer for product output."""
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    slug = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True, allow_null=True)
    brand_id = serializers.UUIDField(read_only=True, allow_null=True)
    category_id = serializers.UUIDField(read_only=True, allow_null=True)
    default_image = serializers.CharField(read_only=True, allow_null=True)
    seo_meta_title = serializers.CharField(read_only=True, allow_null=True)
    seo_meta_desc = serializers.CharField(read_only=True, allow_null=True)
    status = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class ProductDetailSerializer(ProductSerializer):
    """Product with brand, category, variants and images."""
    brand = RelationSummarySerializer(read_only=True, allow_null=True)
    category = RelationSummarySerializer(read_only=True, allow_null=True)
    variants = ProductVariantSerializer(many=True, read_only=True)
    images = ProductImageSerializer(many=True, read_only=True)


class ProductSearchItemSerializer(ProductSerializer):
    price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    sale_price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True, allow_null=True)
    variant_count = serializers.IntegerField(read_only=True)


class PageSerializer(serializers.Serializer):
    total = serializers.IntegerField(read_only=True)
    page = serializers.IntegerField(read_only=True)
    limit = serializers.IntegerField(read_only=True)
    total_pages = serializers.IntegerField(read_only=True)


class ProductListSerializer(PageSerializer):
    products = ProductSerializer(many=True, read_only=True)


class ProductSearchSerializer(PageSerializer):
    products = ProductSearchItemSerializer(many=True, read_only=True)


class VariantInputSerializer(serializers.Serializer):
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    sale_price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True)
    stock_quantity = serializers.IntegerField(min_value=0)
    sku = serializers.CharField(max_length=100, required=False, allow_null=True)
    attributes = serializers.JSONField(required=False, allow_null=True)
    weight = serializers.DecimalField(max_digits=10, decimal_places=3, min_value=0, required=False, allow_null=True)
    barcode = serializers.CharField(max_length=100, required=False, allow_null=True)


class ImageInputSerializer(serializers.Serializer):
    url = serializers.URLField(max_length=500)
    alt_text = serializers.CharField(max_length=255, required=False, allow_null=True)
    sort_order = serializers.IntegerField(required=False, allow_null=True)


class ProductCreateSerializer(serializers.Serializer):
    """Serializer for product creation."""
    name = serializers.CharField(min_length=2, max_length=255)
    slug = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    brand_id = serializers.UUIDField(required=False, allow_null=True)
    category_id = serializers.UUIDField(required=False, allow_null=True)
    default_image = serializers.URLField(max_length=500, required=False, allow_null=True)
    seo_meta_title = serializers.CharField(max_length=255, required=False, allow_null=True)
    seo_meta_desc = serializers.CharField(required=False, allow_null=True)
    status = serializers.ChoiceField(choices=ProductStatus.choices(), default=ProductStatus.DRAFT.value)
    variants = VariantInputSerializer(many=True, required=False)
    images = ImageInputSerializer(many=True, required=False)


class ProductUpdateSerializer(serializers.Serializer):
    """Serializer for product update. Only the fields sent are changed."""
    name = serializers.CharField(min_length=2, max_length=255, required=False)
    slug = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    brand_id = serializers.UUIDField(required=False, allow_null=True)
    category_id = serializers.UUIDField(required=False, allow_null=True)
    default_image = serializers.URLField(max_length=500, required=False, allow_null=True)
    seo_meta_title = serializers.CharField(max_length=255, required=False, allow_null=True)
    seo_meta_desc = serializers.CharField(required=False, allow_null=True)
    status = serializers.ChoiceField(choices=ProductStatus.choices(), required=False)
