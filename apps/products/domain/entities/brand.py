"""
Brand entity.
"""
from dataclasses import dataclass
from typing import Optional

from shared.domain import AggregateRoot
from ..value_objects.slug import Slug


@dataclass(kw_only=True)
class Brand(AggregateRoot):
    name: str
    slug: Slug
    description: Optional[str] = None
    logo_url: Optional[str] = None
    is_active: bool = True

    def activate(self) -> None:
        self.is_active = True
        self.touch()

    def deactivate(self) -> None:
        self.is_active = False
        self.touch()
