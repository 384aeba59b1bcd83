"""
dyn-form: schema-driven forms with one shared validator.

A server hands out a fixed form schema and stores accepted submissions
in a JSON file. Clients validate with the same rules before posting.

Simple Usage:
    from dyn_form import build_default_schema, validate

    schema = build_default_schema()
    result = validate(schema, {"firstName": "", "age": 15})

    result.is_valid          # False
    result.to_error_dict()   # {"firstName": "This field is required.", ...}

Server:
    from dyn_form import SubmissionStore, build_default_schema, create_app

    app = create_app(build_default_schema(), SubmissionStore("db.json"))

Client:
    from dyn_form import FormClient

    with FormClient("http://localhost:4000") as client:
        client.submit({...})
"""

from dyn_form.client import FormClient, blank_payload
from dyn_form.default_schema import build_default_schema
from dyn_form.errors import (
    DynFormError,
    StoreError,
    SubmissionRejected,
)
from dyn_form.export import submissions_to_csv
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
from dyn_form.server import create_app
from dyn_form.storage import SubmissionStore
from dyn_form.validation import validate, validate_payload

__all__ = [
    # Validation
    "validate",
    "validate_payload",
    "ValidationResult",
    "FieldValidationError",
    "ErrorType",
    # Schema
    "FormSchema",
    "build_default_schema",
    # Storage
    "SubmissionStore",
    "SubmissionRecord",
    "SubmissionPage",
    "submissions_to_csv",
    # Server / client
    "create_app",
    "FormClient",
    "blank_payload",
    # Errors
    "DynFormError",
    "StoreError",
    "SubmissionRejected",
]

__version__ = "0.1.0"
