"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or domain invariants are broken.
Their messages are stable: callers and tests match on them, so
rewording one is a breaking change.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when domain validation fails.

    Example: Invalid first name, blank role name, etc.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class InvalidFormatError(ValidationError):
    """
    Raised when a value object cannot parse its input.

    Example: "user@@example.com", a CPF with a wrong check digit.
    """


class OutOfRangeError(ValidationError):
    """
    Raised when a value is well formed but outside its allowed range.

    Example: A date of birth in the future.
    """


class EntityNotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    Example: Looking up a department by ID that doesn't exist.
    """

    def __init__(self, entity_type: str, entity_id: object, message: str | None = None) -> None:
        msg = message or f"{entity_type} with id {entity_id} not found"
        super().__init__(msg, {"entity_type": entity_type, "entity_id": str(entity_id)})
        self.entity_type = entity_type
        self.entity_id = entity_id


class BusinessRuleViolationError(DomainError):
    """
    Raised when a business rule is violated.

    Example: Registering a second employee with the same CPF.
    """

    def __init__(self, rule: str, message: str | None = None) -> None:
        msg = message or f"Business rule violated: {rule}"
        super().__init__(msg, {"rule": rule})
        self.rule = rule


class InvariantViolationError(DomainError):
    """
    Raised when an aggregate invariant is violated.

    Invariants are rules that must always be true for an aggregate
    to be in a valid state.

    Example: An employee must always keep at least one phone.
    """

    def __init__(self, aggregate: str, invariant: str) -> None:
        super().__init__(invariant, {"aggregate": aggregate})
        self.aggregate = aggregate
        self.invariant = invariant


class AuthorizationError(DomainError):
    """
    Raised when an operation is not authorized.

    Example: A Pleno trying to create a Director.
    """

    def __init__(self, message: str = "Not authorized to perform this action") -> None:
        super().__init__(message)
