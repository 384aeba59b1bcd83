"""
CSV export of stored submissions.
"""

import csv
import io
import json
from collections.abc import Iterable

from dyn_form.models.submission import SubmissionRecord

CSV_HEADINGS = ["ID", "Created At", "Data"]


def submissions_to_csv(records: Iterable[SubmissionRecord]) -> str:
    """
    Render submissions as CSV text.

    One row per record; the payload goes into the ``Data`` column as
    compact JSON. An empty input yields only the header row.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADINGS)
    for record in records:
        writer.writerow([
            record.id,
            record.created_at,
            json.dumps(record.data, separators=(",", ":"), ensure_ascii=False),
        ])
    return buffer.getvalue()
