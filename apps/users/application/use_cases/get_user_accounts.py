"""
Get user accounts use case.
"""
from dataclasses import dataclass
from typing import List

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.account_repository import AccountRepository
from ..dtos.account_dto import AccountDTO


@dataclass
class GetUserAccountsUseCase(UseCase[str, List[AccountDTO]]):
    """List how a user can sign in, for support staff."""

    account_repository: AccountRepository

    def execute(self, input_dto: str) -> UseCaseResult[List[AccountDTO]]:
        accounts = self.account_repository.find_by_user_id(input_dto)
        return UseCaseResult.ok([AccountDTO.from_entity(account) for account in accounts])
