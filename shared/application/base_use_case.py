"""
Base use case classes.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

InputDTO = TypeVar('InputDTO')
OutputDTO = TypeVar('OutputDTO')


@dataclass
class UseCaseResult(Generic[OutputDTO]):
    """Result wrapper for use cases. Failures are raised, not returned."""
    data: Optional[OutputDTO] = None

    @classmethod
    def ok(cls, data: Optional[OutputDTO] = None) -> 'UseCaseResult[OutputDTO]':
        """Create a successful result."""
        return cls(data=data)


class UseCase(ABC, Generic[InputDTO, OutputDTO]):
    """Base use case class: one business operation."""

    @abstractmethod
    def execute(self, input_dto: InputDTO) -> UseCaseResult[OutputDTO]:
        """Execute the use case."""
        pass
