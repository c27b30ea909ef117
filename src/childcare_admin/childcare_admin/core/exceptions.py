from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    ``errors`` holds one ``{"field", "message"}`` entry per offending field.
    """

    def __init__(self, message: str = "Validation failed", errors: list[dict] | None = None):
        super().__init__(message)
        self.errors = list(errors or [])


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid or the session is missing."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class ReportDataError(DomainError):
    """Raised when a report is requested without the lookup data it needs."""
