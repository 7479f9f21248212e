"""
Account entity.
"""
from dataclasses import dataclass

from shared.domain import BaseEntity


@dataclass(kw_only=True)
class Account(BaseEntity):
    """
    A sign-in method linked to a user, such as a password credential or an
    OAuth provider identity.
    """
    user_id: str
    provider_id: str
    account_id: str
