"""
Submission storage for dyn-form.
"""

from dyn_form.storage.json_store import (
    SubmissionStore,
    paginate,
    utc_timestamp,
)

__all__ = [
    "SubmissionStore",
    "paginate",
    "utc_timestamp",
]
