"""
Form schema model.

A FormSchema is built once at startup and handed to whoever needs it: the
HTTP app serves it, the validator checks payloads against it, the client
rebuilds it from the server's response.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dyn_form.models.field_definitions import FieldSpec


class FormSchema(BaseModel):
    """
    Complete, immutable form definition.

    Field order is display order and validation order.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Form title")
    description: str = Field(default="", description="Form description")
    fields: tuple[FieldSpec, ...] = Field(..., description="Form fields, in display order")

    @model_validator(mode="after")
    def _check_unique_names(self) -> "FormSchema":
        seen: set[str] = set()
        duplicates = []
        for field in self.fields:
            if field.name in seen:
                duplicates.append(field.name)
            seen.add(field.name)
        if duplicates:
            raise ValueError(f"Duplicate field names: {', '.join(duplicates)}")
        return self

    @property
    def field_names(self) -> list[str]:
        """Field names in schema order."""
        return [field.name for field in self.fields]

    def get_field(self, name: str) -> FieldSpec | None:
        """Look up a field by name."""
        for field in self.fields:
            if field.name == name:
                return field
        return None

    def required_fields(self) -> list[str]:
        """Names of fields that must be filled in."""
        return [field.name for field in self.fields if field.required]

    def to_client_config(self) -> dict[str, Any]:
        """Export the schema document served to form clients (camelCase keys)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
