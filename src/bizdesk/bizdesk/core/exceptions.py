class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InsufficientBalance(DomainError):
    """Raised when an advance exceeds the employee's current net salary."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class Forbidden(AuthorizationError):
    """Raised when the actor's role fails a fixed-tier or module-level check."""


class ProtectedRecord(DomainError):
    """Raised on an attempt to delete the reserved primary-owner record."""


class NotFound(DomainError):
    """Raised when the target id of an operation does not exist."""
