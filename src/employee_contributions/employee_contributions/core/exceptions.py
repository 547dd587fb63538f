class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when a required field is missing or malformed."""


class NotFoundError(DomainError):
    """Raised when an id has no matching record."""


class InvalidReferenceError(DomainError):
    """Raised when a contribution points at an employee that does not exist."""


class StoreError(DomainError):
    """Raised when the database driver fails (connectivity, SQL errors)."""
