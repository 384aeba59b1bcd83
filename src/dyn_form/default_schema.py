"""
The form shipped with dyn-form: employee onboarding.

Build it with ``build_default_schema()`` and pass it to the app or the
validator. Nothing here is module-level state.
"""

from typing import Any

from dyn_form.models.form_schema import FormSchema

DEFAULT_SCHEMA_DOCUMENT: dict[str, Any] = {
    "title": "Employee Onboarding",
    "description": "Collect basic employee details for onboarding.",
    "fields": [
        {
            "name": "firstName",
            "label": "First Name",
            "type": "text",
            "placeholder": "John",
            "required": True,
            "validation": {"minLength": 2, "maxLength": 50},
        },
        {
            "name": "lastName",
            "label": "Last Name",
            "type": "text",
            "placeholder": "Doe",
            "required": True,
            "validation": {"minLength": 2, "maxLength": 50},
        },
        {
            "name": "age",
            "label": "Age",
            "type": "number",
            "placeholder": "30",
            "required": True,
            "validation": {"min": 18, "max": 80},
        },
        {
            "name": "startDate",
            "label": "Start Date",
            "type": "date",
            "placeholder": "",
            "required": True,
            "validation": {"minDate": "2020-01-01"},
        },
        {
            "name": "role",
            "label": "Role",
            "type": "select",
            "placeholder": "Select role",
            "required": True,
            "options": ["Developer", "Designer", "Product", "HR"],
        },
        {
            "name": "skills",
            "label": "Skills",
            "type": "multi-select",
            "placeholder": "Select skills",
            "required": False,
            "options": ["React", "Node", "SQL", "Design", "Testing"],
            "validation": {"minSelected": 0, "maxSelected": 5},
        },
        {
            "name": "bio",
            "label": "Biography",
            "type": "textarea",
            "placeholder": "A short bio",
            "required": False,
            "validation": {"maxLength": 500},
        },
        {
            "name": "remote",
            "label": "Remote Worker",
            "type": "switch",
            "placeholder": "",
            "required": False,
        },
    ],
}


def build_default_schema() -> FormSchema:
    """Build the employee onboarding schema."""
    return FormSchema.model_validate(DEFAULT_SCHEMA_DOCUMENT)
