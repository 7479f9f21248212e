"""
Account DTOs.
"""
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from ...domain.entities.account import Account


@dataclass
class AccountDTO:
    id: UUID
    provider_id: str
    account_id: str
    created_at: datetime

    @classmethod
    def from_entity(cls, account: Account) -> 'AccountDTO':
        return cls(
            id=account.id,
            provider_id=account.provider_id,
            account_id=account.account_id,
            created_at=account.created_at,
        )
