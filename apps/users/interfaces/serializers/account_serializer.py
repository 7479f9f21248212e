"""
Account serializers.
"""
from rest_framework import serializers


class AccountSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    provider_id = serializers.CharField(read_only=True)
    account_id = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
