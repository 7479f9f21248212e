"""
Slug value object.
"""
import re
from dataclasses import dataclass

from shared.domain import ValueObject
from ..exceptions import InvalidSlugError

SLUG_PATTERN = re.compile(r'^[a-z0-9\-_]+$')


@dataclass(frozen=True)
class Slug(ValueObject):
    """URL-safe identifier: lowercase letters, digits, hyphens and underscores."""
    value: str

    def validate(self) -> None:
        if not isinstance(self.value, str) or not SLUG_PATTERN.match(self.value):
            raise InvalidSlugError(self.value)

    def __str__(self) -> str:
        return self.value
