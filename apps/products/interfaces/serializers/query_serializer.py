"""
Query string serializers for list endpoints.

Query parameters arrive in camelCase (sortBy, categoryId, ...) and are
mapped onto the snake_case names the list DTOs use.
"""
from rest_framework import serializers

from ...domain.value_objects.product_status import ProductStatus

SORT_FIELDS = {
    'createdAt': 'created_at',
    'updatedAt': 'updated_at',
    'name': 'name',
}


class ListQuerySerializer(serializers.Serializer):
    page = serializers.IntegerField(min_value=1, default=1)
    limit = serializers.IntegerField(min_value=1, max_value=100, default=10)
    sortBy = serializers.ChoiceField(choices=list(SORT_FIELDS), default='createdAt', source='sort_by')
    sortOrder = serializers.ChoiceField(choices=['asc', 'desc'], default='desc', source='sort_order')
    search = serializers.CharField(required=False, allow_blank=True, max_length=255)

    def validate_sortBy(self, value):
        return SORT_FIELDS[value]


class ProductQuerySerializer(ListQuerySerializer):
    status = serializers.ChoiceField(choices=ProductStatus.choices(), required=False)
    categoryId = serializers.UUIDField(required=False, source='category_id')
    brandId = serializers.UUIDField(required=False, source='brand_id')


class CategoryQuerySerializer(ListQuerySerializer):
    parentId = serializers.CharField(required=False, source='parent_id')
    active = serializers.BooleanField(required=False, source='is_active')

    def validate_parentId(self, value):
        """'null' selects root categories, anything else must be a UUID."""
        if value == 'null':
            return value
        return serializers.UUIDField().to_internal_value(value)


class BrandQuerySerializer(ListQuerySerializer):
    limit = serializers.IntegerField(min_value=1, max_value=100, default=50)
    sortBy = serializers.ChoiceField(choices=list(SORT_FIELDS), default='name', source='sort_by')
    sortOrder = serializers.ChoiceField(choices=['asc', 'desc'], default='asc', source='sort_order')
    active = serializers.BooleanField(default=True, source='is_active')
