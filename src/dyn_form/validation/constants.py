"""
Error message templates for the schema validator.

Messages are returned verbatim to the submitter, keyed by field name.
"""

REQUIRED_MESSAGE = "This field is required."

# text / textarea
MIN_LENGTH_MESSAGE = "Minimum length is {limit}"
MAX_LENGTH_MESSAGE = "Maximum length is {limit}"
PATTERN_MESSAGE = "Invalid format."

# number
NOT_A_NUMBER_MESSAGE = "Must be a number."
MIN_VALUE_MESSAGE = "Minimum value is {limit}"
MAX_VALUE_MESSAGE = "Maximum value is {limit}"

# multi-select
NOT_AN_ARRAY_MESSAGE = "Must be an array."
MIN_SELECTED_MESSAGE = "Select at least {limit} items."
MAX_SELECTED_MESSAGE = "Select at most {limit} items."

# date
INVALID_DATE_MESSAGE = "Invalid date."
MIN_DATE_MESSAGE = "Date must be on/after {limit}"
