from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class FieldError:
    """One failed rule on one form field, rendered inline on the form."""

    field: str
    message: str


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class FormValidationError(ValidationError):
    """Raised with every field error collected from a submitted form."""

    def __init__(self, errors: Sequence[FieldError]):
        self.errors = list(errors)
        super().__init__("; ".join(e.message for e in self.errors))


class DuplicateStudentError(ValidationError):
    """Raised when the store rejects a student because nik/nisn already exists."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class NotFoundError(DomainError):
    """Raised when a requested record does not exist."""


class StoreError(Exception):
    """Raised when the persistence layer is unreachable or fails."""
