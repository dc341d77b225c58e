"""
Base use case classes.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, List, TypeVar, Optional

InputDTO = TypeVar('InputDTO')
OutputDTO = TypeVar('OutputDTO')


@dataclass
class UseCaseResult(Generic[OutputDTO]):
    """Outcome of a use case.

    Domain rule violations are raised, not returned; ``warnings`` carries
    advisory notes (for example an unpaid deposit) that do not block the
    operation.
    """
    data: Optional[OutputDTO] = None
    warnings: List[str] = field(default_factory=list)

    @classmethod
    def ok(cls, data: OutputDTO, warnings: Optional[List[str]] = None) -> 'UseCaseResult[OutputDTO]':
        """Create a successful result."""
        return cls(data=data, warnings=list(warnings or []))

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


class UseCase(ABC, Generic[InputDTO, OutputDTO]):
    """Base use case class."""

    @abstractmethod
    def execute(self, input_dto: InputDTO) -> UseCaseResult[OutputDTO]:
        """Execute the use case."""
        pass
