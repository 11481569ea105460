class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class UnsupportedFileError(DomainError):
    """Raised when an uploaded punch sheet cannot be decoded."""
