class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MissingSelectionError(DomainError):
    """Raised when a day is advanced without an employee selected."""


class NotFoundError(DomainError):
    """Raised when a referenced employee does not exist."""


class CalculationError(DomainError):
    """Raised when a salary or report computation fails unexpectedly."""


class StorageError(DomainError):
    """Raised when the storage gateway fails to apply a write."""
