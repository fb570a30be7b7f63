from __future__ import annotations

from typing import Optional, Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Raised when request payload fails shape validation.

    Carries every collected error so the client sees the full list at once.
    """

    def __init__(self, errors: Sequence[str], message: str = "Validation failed"):
        super().__init__(message)
        self.errors = list(errors)


class BusinessRuleError(DomainError):
    """Raised for duplicates, missing referenced rows and ordering violations."""


class NotFoundError(DomainError):
    """Raised when the addressed resource does not exist."""

    def __init__(self, resource: str, message: Optional[str] = None):
        super().__init__(message or f"{resource} not found")
        self.resource = resource
