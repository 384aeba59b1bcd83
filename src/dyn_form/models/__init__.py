"""
Data models for dyn-form.

This module contains Pydantic models for:
- Field definitions (one variant per field type)
- The form schema
- Validation results
- Stored submissions
"""

from dyn_form.models.field_definitions import (
    DateField,
    DateValidation,
    FieldSpec,
    MultiSelectField,
    MultiSelectValidation,
    NumberField,
    NumberValidation,
    SelectField,
    SwitchField,
    TextareaField,
    TextField,
    TextValidation,
)
from dyn_form.models.form_schema import FormSchema
from dyn_form.models.submission import (
    SubmissionPage,
    SubmissionRecord,
)
from dyn_form.models.validation_result import (
    ErrorType,
    FieldValidationError,
    ValidationResult,
)

__all__ = [
    # Field variants
    "FieldSpec",
    "TextField",
    "TextareaField",
    "NumberField",
    "DateField",
    "SelectField",
    "MultiSelectField",
    "SwitchField",
    # Constraint bundles
    "TextValidation",
    "NumberValidation",
    "DateValidation",
    "MultiSelectValidation",
    # Schema
    "FormSchema",
    # Validation
    "ErrorType",
    "FieldValidationError",
    "ValidationResult",
    # Submissions
    "SubmissionRecord",
    "SubmissionPage",
]
