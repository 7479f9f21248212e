"""
Django ORM implementation of AccountRepository.
"""
from typing import List

from ...domain.entities.account import Account
from ...domain.repositories.account_repository import AccountRepository
from ..models.account_model import AccountModel


class DjangoAccountRepository(AccountRepository):

    def find_by_user_id(self, user_id: str) -> List[Account]:
        models = AccountModel.objects.filter(user_id=user_id).order_by('created_at')
        return [self._to_entity(model) for model in models]

    def _to_entity(self, model: AccountModel) -> Account:
        return Account(
            id=model.id,
            user_id=model.user_id,
            provider_id=model.provider_id,
            account_id=model.account_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
