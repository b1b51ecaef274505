"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity, creation and modification timestamps
- EntityId: Strongly-typed UUID identifiers
- Domain exceptions with stable messages
"""

from .entity import Entity, EntityId, utc_now
from .exceptions import (
    AuthorizationError,
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
    InvalidFormatError,
    InvariantViolationError,
    OutOfRangeError,
    ValidationError,
)
from .value_object import ValueObject

__all__ = [
    "AuthorizationError",
    "BusinessRuleViolationError",
    "DomainError",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "InvalidFormatError",
    "InvariantViolationError",
    "OutOfRangeError",
    "ValidationError",
    "ValueObject",
    "utc_now",
]
