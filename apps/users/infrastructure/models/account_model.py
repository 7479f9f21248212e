"""
Account Django ORM model.
"""
import uuid

from django.db import models


class AccountModel(models.Model):
    """Sign-in method linked to a user (credential or OAuth provider)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_id = models.CharField(max_length=64, db_index=True)
    provider_id = models.CharField(max_length=64)
    account_id = models.CharField(max_length=255)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'accounts'
        ordering = ['created_at']
        constraints = [
            models.UniqueConstraint(fields=['provider_id', 'account_id'], name='account_unique_provider_account'),
        ]

    def __str__(self):
        return f"{self.provider_id}:{self.account_id}"
