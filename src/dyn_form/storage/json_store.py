"""
JSON-file submission store.

All submissions live in one JSON document::

    {"submissions": [{"id": ..., "createdAt": ..., "data": {...}}, ...]}

Newest submissions come first. Other top-level keys found in the file are
kept as they are. Writes go through a temp file and an atomic replace;
the lock only covers writers inside this process.
"""

import json
import logging
import math
import os
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from dyn_form.coercion import parse_date
from dyn_form.errors import StoreError
from dyn_form.models.submission import SubmissionPage, SubmissionRecord

logger = logging.getLogger("dyn-form.store")

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def paginate(
    records: list[SubmissionRecord],
    page: int = 1,
    limit: int = 10,
    sort_by: str = "createdAt",
    sort_order: str = "desc",
) -> SubmissionPage:
    """
    Sort and slice submission records into one page.

    Only ``createdAt`` is a sortable column; any other ``sort_by`` keeps the
    store order. Pages past the end are empty.

    Args:
        records: Records in store order (newest first).
        page: 1-based page number.
        limit: Page size, at least 1.
        sort_by: Column to sort on.
        sort_order: "asc" or "desc".

    Returns:
        SubmissionPage with totals and the page's items.
    """
    items = list(records)
    if sort_by == "createdAt":
        items.sort(
            key=lambda record: parse_date(record.created_at) or _OLDEST,
            reverse=sort_order != "asc",
        )

    total = len(items)
    total_pages = max(1, math.ceil(total / limit))
    start = (page - 1) * limit

    return SubmissionPage(
        page=page,
        limit=limit,
        total=total,
        total_pages=total_pages,
        items=items[start:start + limit],
    )


class SubmissionStore:
    """
    Append-only store for accepted submissions, backed by one JSON file.

    Usage:
        store = SubmissionStore("db.json")
        record = store.append({"firstName": "Jo"})
        page = store.list_page(page=1, limit=10)
    """

    def __init__(self, path: str | Path):
        """
        Initialize the store.

        Args:
            path: Location of the JSON file. It is created on first write.
        """
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read_document(self) -> dict[str, Any]:
        if not self.path.exists():
            return {"submissions": []}

        try:
            document = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError as e:
            raise StoreError(
                f"Submission file is not valid JSON: {self.path}",
                details={"path": str(self.path), "error": str(e)},
            ) from e
        except OSError as e:
            raise StoreError(
                f"Could not read submission file: {self.path}",
                details={"path": str(self.path), "error": str(e)},
            ) from e

        if not isinstance(document, dict):
            raise StoreError(f"Submission file must contain a JSON object: {self.path}")

        submissions = document.setdefault("submissions", [])
        if not isinstance(submissions, list):
            raise StoreError(f"'submissions' must be a list in {self.path}")
        return document

    def _write_document(self, document: dict[str, Any]) -> None:
        temp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            temp_path.replace(self.path)
        except OSError as e:
            raise StoreError(
                f"Could not write submission file: {self.path}",
                details={"path": str(self.path), "error": str(e)},
            ) from e

    def all(self) -> list[SubmissionRecord]:
        """All records, newest first."""
        documents = self._read_document()["submissions"]
        try:
            return [SubmissionRecord.model_validate(doc) for doc in documents]
        except ValidationError as e:
            raise StoreError(
                f"Malformed submission record in {self.path}",
                details={"path": str(self.path), "error": str(e)},
            ) from e

    def count(self) -> int:
        """Number of stored submissions."""
        return len(self._read_document()["submissions"])

    def get(self, submission_id: str) -> SubmissionRecord | None:
        """Look up one submission by id."""
        for record in self.all():
            if record.id == submission_id:
                return record
        return None

    def append(self, payload: dict[str, Any]) -> SubmissionRecord:
        """
        Store an accepted payload as a new submission.

        Args:
            payload: The validated payload.

        Returns:
            The stored record with its generated id and timestamp.

        Raises:
            StoreError: If the file cannot be read or written.
        """
        record = SubmissionRecord(
            id=uuid.uuid4().hex,
            created_at=utc_timestamp(),
            data=dict(payload),
        )
        with self._lock:
            document = self._read_document()
            document["submissions"].insert(0, record.to_document())
            self._write_document(document)

        logger.info(f"Stored submission {record.id} in {self.path}")
        return record

    def list_page(
        self,
        page: int = 1,
        limit: int = 10,
        sort_by: str = "createdAt",
        sort_order: str = "desc",
    ) -> SubmissionPage:
        """Return one sorted page of submissions. See ``paginate``."""
        return paginate(
            self.all(),
            page=page,
            limit=limit,
            sort_by=sort_by,
            sort_order=sort_order,
        )
