"""
Cart entity (Aggregate Root).
"""
from dataclasses import dataclass
from typing import Optional

from shared.domain import AggregateRoot
from ..exceptions import InvalidCartOwnerError


@dataclass(kw_only=True)
class Cart(AggregateRoot):
    """
    Shopping cart owned either by a signed-in user or by a guest session.

    Exactly one owner is set. Items are stored and loaded separately through
    the cart repository.
    """
    user_id: Optional[str] = None
    session_id: Optional[str] = None

    def __post_init__(self):
        if bool(self.user_id) == bool(self.session_id):
            raise InvalidCartOwnerError()

    @classmethod
    def create(cls, user_id: Optional[str] = None, session_id: Optional[str] = None) -> 'Cart':
        """Create a new cart for a user or a guest session."""
        return cls(user_id=user_id, session_id=session_id)

    def assign_to_user(self, user_id: str) -> None:
        """Hand a guest cart over to a user who just signed in."""
        if not user_id:
            raise InvalidCartOwnerError()
        self.user_id = user_id
        self.session_id = None
        self.touch()

    @property
    def is_guest(self) -> bool:
        return self.user_id is None
