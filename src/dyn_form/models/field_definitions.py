"""
Field definition models for schema-driven forms.

Every field type is its own model, discriminated on ``type``. Each model
only carries the constraint bundle that applies to it, so a schema such as
``{"type": "text", "validation": {"minSelected": 1}}`` is rejected when the
schema is built instead of being silently ignored at validation time.
"""

import re
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dyn_form.coercion import parse_date


class _Constraints(BaseModel):
    """Base for per-type constraint bundles (camelCase on the wire)."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)


class TextValidation(_Constraints):
    """Constraints for ``text`` and ``textarea`` fields."""

    min_length: int | None = Field(default=None, alias="minLength", ge=0)
    max_length: int | None = Field(default=None, alias="maxLength", ge=0)
    regex: str | None = Field(default=None, description="Pattern searched anywhere in the value")

    @field_validator("regex")
    @classmethod
    def _check_regex(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                re.compile(value)
            except re.error as e:
                raise ValueError(f"Invalid regex {value!r}: {e}") from e
        return value


class NumberValidation(_Constraints):
    """Inclusive numeric bounds."""

    min: int | float | None = None
    max: int | float | None = None


class DateValidation(_Constraints):
    """Inclusive lower date bound, kept as the configured string for messages."""

    min_date: str | None = Field(default=None, alias="minDate")

    @field_validator("min_date")
    @classmethod
    def _check_min_date(cls, value: str | None) -> str | None:
        if value and parse_date(value) is None:
            raise ValueError(f"minDate {value!r} is not a valid date")
        return value


class MultiSelectValidation(_Constraints):
    """Inclusive bounds on the number of selected options."""

    min_selected: int | None = Field(default=None, alias="minSelected", ge=0)
    max_selected: int | None = Field(default=None, alias="maxSelected", ge=0)


class _BaseField(BaseModel):
    """Attributes shared by every field variant."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1, description="Key into the payload and error map")
    label: str = Field(..., description="Display label")
    required: bool = Field(default=False, description="Whether an empty value is rejected")
    placeholder: str = Field(default="", description="Display hint")


class TextField(_BaseField):
    type: Literal["text"] = "text"
    validation: TextValidation | None = None


class TextareaField(_BaseField):
    type: Literal["textarea"] = "textarea"
    validation: TextValidation | None = None


class NumberField(_BaseField):
    type: Literal["number"] = "number"
    validation: NumberValidation | None = None


class DateField(_BaseField):
    type: Literal["date"] = "date"
    validation: DateValidation | None = None


class SelectField(_BaseField):
    type: Literal["select"] = "select"
    options: tuple[str, ...] = Field(default=(), description="Allowed values, in display order")


class MultiSelectField(_BaseField):
    type: Literal["multi-select"] = "multi-select"
    options: tuple[str, ...] = Field(default=(), description="Allowed values, in display order")
    validation: MultiSelectValidation | None = None


class SwitchField(_BaseField):
    type: Literal["switch"] = "switch"


FieldSpec = Annotated[
    Union[
        TextField,
        TextareaField,
        NumberField,
        DateField,
        SelectField,
        MultiSelectField,
        SwitchField,
    ],
    Field(discriminator="type"),
]
