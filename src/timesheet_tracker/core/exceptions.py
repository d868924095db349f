class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class UnknownStatusError(DomainError):
    """Raised when a day carries no attendance status the resolver can rank."""
