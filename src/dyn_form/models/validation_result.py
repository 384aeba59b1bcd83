"""
Validation result models for form input validation.

A result holds at most one error per field. An empty result means the
payload is accepted.
"""

from enum import Enum

from pydantic import BaseModel, Field


class ErrorType(str, Enum):
    """Category of a field validation failure."""

    REQUIRED = "required"
    FORMAT = "format"
    RANGE = "range"
    LENGTH = "length"
    CARDINALITY = "cardinality"
    SHAPE = "shape"
    PATTERN = "pattern"


class FieldValidationError(BaseModel):
    """Validation error for a specific field."""

    field_name: str = Field(..., description="Name of the field with error")
    error_type: ErrorType = Field(..., description="Category of the failure")
    message: str = Field(..., description="Human-readable error message")


class ValidationResult(BaseModel):
    """Result of validating one payload against a schema."""

    errors: dict[str, FieldValidationError] = Field(
        default_factory=dict, description="Errors keyed by field name"
    )

    @property
    def is_valid(self) -> bool:
        """Whether the payload passed every check."""
        return not self.errors

    @property
    def error_count(self) -> int:
        """Get the number of fields with errors."""
        return len(self.errors)

    def get_field_error(self, field_name: str) -> FieldValidationError | None:
        """Get the error recorded for a specific field, if any."""
        return self.errors.get(field_name)

    def to_error_dict(self) -> dict[str, str]:
        """Convert errors to a dict mapping field names to error messages."""
        return {name: error.message for name, error in self.errors.items()}
