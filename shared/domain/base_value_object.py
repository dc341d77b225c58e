"""
Base value object class for DDD.
"""
from abc import ABC
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Immutable value compared by its dataclass fields.

    Subclasses put their invariants in ``_validate``; it runs once on
    construction so an invalid instance never exists.
    """

    def __post_init__(self):
        self._validate()

    def _validate(self) -> None:
        pass

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values() == other._values()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._values()))

    def _values(self) -> tuple:
        return tuple(getattr(self, f.name) for f in fields(self))
