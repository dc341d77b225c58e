"""
Base entity classes for DDD.
"""
from abc import ABC
from dataclasses import dataclass, field
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(kw_only=True, eq=False)
class BaseEntity(ABC):
    """Base entity class with identity.

    ``id`` is assigned by storage; ``0`` marks an entity that was never saved.
    """
    id: int = 0
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseEntity):
            return False
        if not self.id or not other.id:
            return self is other
        return type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        if not self.id:
            return id(self)
        return hash((type(self).__name__, self.id))

    @property
    def is_new(self) -> bool:
        """Check if the entity has not been persisted yet."""
        return self.id == 0

    def touch(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = utc_now()


@dataclass(kw_only=True, eq=False)
class AggregateRoot(BaseEntity):
    """Aggregate root base class with an optimistic-lock version."""
    version: int = 0
