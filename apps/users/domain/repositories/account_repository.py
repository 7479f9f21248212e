"""
Account repository interface.
"""
from abc import ABC, abstractmethod
from typing import List

from ..entities.account import Account


class AccountRepository(ABC):

    @abstractmethod
    def find_by_user_id(self, user_id: str) -> List[Account]:
        """List the sign-in accounts linked to a user."""
        pass
