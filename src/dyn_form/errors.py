"""
Exception hierarchy for dyn-form.

Validation failures are never exceptions: they come back as a
ValidationResult. These exceptions are for system faults and for the
client surfacing a rejected submission.
"""

from __future__ import annotations


class DynFormError(Exception):
    """Base exception for all dyn-form errors."""

    def __init__(self, message: str, *, details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message)


class StoreError(DynFormError):
    """Reading or writing the submission file failed."""
    pass


class SubmissionRejected(DynFormError):
    """A submission failed validation, locally or on the server."""

    def __init__(
        self,
        message: str,
        *,
        errors: dict[str, str] | None = None,
        status_code: int | None = None,
        **kwargs,
    ) -> None:
        self.errors = errors or {}
        self.status_code = status_code
        super().__init__(message, **kwargs)
