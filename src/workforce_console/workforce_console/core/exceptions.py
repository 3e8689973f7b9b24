class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidFormatError(ValidationError):
    """Raised when pasted data cannot be parsed."""


class AuthenticationError(DomainError):
    """Raised when there is no resolved identity or login fails."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class RecordNotFoundError(AuthorizationError):
    """Raised when a write targets a row the caller does not own (zero rows affected)."""


class PersistenceError(DomainError):
    """Raised when the store rejects a read or write."""


class ExternalServiceError(DomainError):
    """Raised when the vision extraction call fails or returns garbage."""
