# Shared domain module
from .base_entity import BaseEntity, AggregateRoot, utc_now
from .base_value_object import ValueObject
from .exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
    InvalidOperationError,
    ConflictError,
)

__all__ = [
    'BaseEntity',
    'AggregateRoot',
    'utc_now',
    'ValueObject',
    'DomainException',
    'EntityNotFoundError',
    'ValidationError',
    'InvalidOperationError',
    'ConflictError',
]
