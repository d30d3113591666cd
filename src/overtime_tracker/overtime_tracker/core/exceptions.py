class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidTimeFormat(ValidationError):
    """Raised when a clock-in/clock-out value is not a valid HH:MM time."""


class InvalidShiftSpan(ValidationError):
    """Raised when a normalized shift is empty or longer than 48 hours."""


class NotFoundError(DomainError):
    """Raised when no record is stored under the requested date."""
