"""
Order repository interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from ..entities.order import Order


class OrderRepository(ABC):
    """Abstract repository for Order aggregate."""

    @abstractmethod
    def create_order(self, order: Order) -> Order:
        """Persist an order and its items."""
        pass

    @abstractmethod
    def get_orders_by_user(self, user_id: str) -> List[Order]:
        """List a user's orders, newest first."""
        pass

    @abstractmethod
    def get_order_with_items(self, order_id: UUID) -> Optional[Order]:
        """Find an order by ID with its items."""
        pass
