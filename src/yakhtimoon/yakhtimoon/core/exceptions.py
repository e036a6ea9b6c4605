from __future__ import annotations

from typing import Mapping, Optional, Sequence


class DomainError(Exception):
    """Base exception for form and collaborator failures."""


class ValidationError(DomainError):
    """Raised when user input is invalid. The message is already localized."""


class InvalidQrFormatError(ValidationError):
    """Raised when a scanned QR payload is not a valid attendance card."""


class StudentNotFoundError(ValidationError):
    """Raised when a manually typed identifier matches no student."""


class PasswordMismatchError(ValidationError):
    """Raised when password and confirmation differ."""


class SubmissionInProgressError(DomainError):
    """Raised when a form is submitted while a previous save is still running."""


class ApiError(DomainError):
    """Raised when the REST API call fails."""

    def __init__(self, message: str, *, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class ApiValidationError(ApiError):
    """HTTP 422 from the API, carrying the per-field error map."""

    def __init__(self, message: str, errors: Mapping[str, Sequence[str]], *, status: int = 422):
        super().__init__(message, status=status)
        self.errors = {str(k): [str(m) for m in v] for k, v in errors.items()}
