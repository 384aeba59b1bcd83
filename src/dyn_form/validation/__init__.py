"""
Schema validation for dyn-form.

Shared by the HTTP app and the client so both enforce the same rules.
"""

from dyn_form.validation.validator import validate, validate_payload

__all__ = [
    "validate",
    "validate_payload",
]
