"""
Schema-driven payload validation.

This is the single implementation of the form's acceptance rules. The HTTP
app runs it before storing a submission and the client runs it before
posting, so both sides always agree on what is valid.

Rules per field:
1. Presence: a required field that is missing, None, "" or [] gets the
   required error and nothing else.
2. Type rules run in a fixed order. When several rules fail for one field,
   the last failing rule's message is the one kept.
"""

import re
from collections.abc import Mapping
from typing import Any, Callable

from dyn_form.coercion import format_number, parse_date, parse_number, to_text
from dyn_form.models.field_definitions import (
    DateField,
    MultiSelectField,
    NumberField,
    TextField,
    TextareaField,
)
from dyn_form.models.form_schema import FormSchema
from dyn_form.models.validation_result import (
    ErrorType,
    FieldValidationError,
    ValidationResult,
)
from dyn_form.validation.constants import (
    INVALID_DATE_MESSAGE,
    MAX_LENGTH_MESSAGE,
    MAX_SELECTED_MESSAGE,
    MAX_VALUE_MESSAGE,
    MIN_DATE_MESSAGE,
    MIN_LENGTH_MESSAGE,
    MIN_SELECTED_MESSAGE,
    MIN_VALUE_MESSAGE,
    NOT_A_NUMBER_MESSAGE,
    NOT_AN_ARRAY_MESSAGE,
    PATTERN_MESSAGE,
    REQUIRED_MESSAGE,
)

Failure = tuple[ErrorType, str]

_MISSING = object()


def _is_empty(value: Any) -> bool:
    """Presence test for required fields."""
    if value is _MISSING or value is None:
        return True
    if isinstance(value, str):
        return value == ""
    return isinstance(value, (list, tuple)) and len(value) == 0


def _has_value(value: Any) -> bool:
    """Whether type rules apply. Empty lists still count as a value."""
    if value is _MISSING or value is None:
        return False
    return not (isinstance(value, str) and value == "")


def _check_text(field: TextField | TextareaField, value: Any) -> Failure | None:
    rules = field.validation
    if rules is None:
        return None

    text = to_text(value)
    failure = None
    if rules.min_length and len(text) < rules.min_length:
        failure = (ErrorType.LENGTH, MIN_LENGTH_MESSAGE.format(limit=rules.min_length))
    if rules.max_length and len(text) > rules.max_length:
        failure = (ErrorType.LENGTH, MAX_LENGTH_MESSAGE.format(limit=rules.max_length))
    if rules.regex and re.search(rules.regex, text) is None:
        failure = (ErrorType.PATTERN, PATTERN_MESSAGE)
    return failure


def _check_number(field: NumberField, value: Any) -> Failure | None:
    number = parse_number(value)
    if number is None:
        return (ErrorType.FORMAT, NOT_A_NUMBER_MESSAGE)

    rules = field.validation
    if rules is None:
        return None

    failure = None
    if rules.min is not None and number < rules.min:
        failure = (ErrorType.RANGE, MIN_VALUE_MESSAGE.format(limit=format_number(rules.min)))
    if rules.max is not None and number > rules.max:
        failure = (ErrorType.RANGE, MAX_VALUE_MESSAGE.format(limit=format_number(rules.max)))
    return failure


def _check_multi_select(field: MultiSelectField, value: Any) -> Failure | None:
    if not isinstance(value, (list, tuple)):
        return (ErrorType.SHAPE, NOT_AN_ARRAY_MESSAGE)

    rules = field.validation
    if rules is None:
        return None

    failure = None
    if rules.min_selected is not None and len(value) < rules.min_selected:
        failure = (ErrorType.CARDINALITY, MIN_SELECTED_MESSAGE.format(limit=rules.min_selected))
    if rules.max_selected is not None and len(value) > rules.max_selected:
        failure = (ErrorType.CARDINALITY, MAX_SELECTED_MESSAGE.format(limit=rules.max_selected))
    return failure


def _check_date(field: DateField, value: Any) -> Failure | None:
    parsed = parse_date(value)
    if parsed is None:
        return (ErrorType.FORMAT, INVALID_DATE_MESSAGE)

    rules = field.validation
    if rules is None or not rules.min_date:
        return None

    # min_date is checked to be parseable when the schema is built
    lower_bound = parse_date(rules.min_date)
    if lower_bound is not None and parsed < lower_bound:
        return (ErrorType.RANGE, MIN_DATE_MESSAGE.format(limit=rules.min_date))
    return None


def _check_select(field: Any, value: Any) -> Failure | None:
    # Presence is the only rule; options are not enforced
    return None


def _check_switch(field: Any, value: Any) -> Failure | None:
    return None


_RULE_HANDLERS: dict[str, Callable[[Any, Any], Failure | None]] = {
    "text": _check_text,
    "textarea": _check_text,
    "number": _check_number,
    "date": _check_date,
    "select": _check_select,
    "multi-select": _check_multi_select,
    "switch": _check_switch,
}


def validate(schema: FormSchema, payload: Mapping[str, Any]) -> ValidationResult:
    """
    Validate a submitted payload against a form schema.

    Never raises for bad payloads: a payload that is not a mapping is
    treated as empty, so every required field reports as missing.

    Args:
        schema: The form schema to validate against.
        payload: Submitted values keyed by field name.

    Returns:
        ValidationResult with at most one error per field. An empty
        result means the payload is accepted.

    Example:
        >>> result = validate(schema, {"firstName": ""})
        >>> result.to_error_dict()["firstName"]
        'This field is required.'
    """
    values = payload if isinstance(payload, Mapping) else {}
    errors: dict[str, FieldValidationError] = {}

    for field in schema.fields:
        value = values.get(field.name, _MISSING)

        if field.required and _is_empty(value):
            errors[field.name] = FieldValidationError(
                field_name=field.name,
                error_type=ErrorType.REQUIRED,
                message=REQUIRED_MESSAGE,
            )
            continue

        if not _has_value(value):
            continue

        handler = _RULE_HANDLERS.get(field.type)
        if handler is None:
            continue

        failure = handler(field, value)
        if failure is not None:
            error_type, message = failure
            errors[field.name] = FieldValidationError(
                field_name=field.name,
                error_type=error_type,
                message=message,
            )

    return ValidationResult(errors=errors)


def validate_payload(schema: FormSchema, payload: Mapping[str, Any]) -> dict[str, str]:
    """Shortcut returning the plain ``{field: message}`` error map."""
    return validate(schema, payload).to_error_dict()
