"""
HTTP client for a dyn-form server.

The client fetches the server's schema and runs the same validator locally
before posting, so obviously bad input never leaves the caller.

Usage:
    with FormClient("http://localhost:4000") as client:
        payload = blank_payload(client.fetch_schema())
        payload.update(firstName="Jo", lastName="Doe", age=30,
                       startDate="2021-01-01", role="Developer")
        receipt = client.submit(payload)
"""

import logging
from typing import Any

import httpx

from dyn_form.config import get_config
from dyn_form.errors import SubmissionRejected
from dyn_form.models.form_schema import FormSchema
from dyn_form.models.submission import SubmissionPage
from dyn_form.models.validation_result import ValidationResult
from dyn_form.validation import validate

logger = logging.getLogger("dyn-form.client")


def blank_payload(schema: FormSchema) -> dict[str, Any]:
    """
    Initial values for a fresh form.

    Multi-selects start as an empty list, switches as False and every other
    field as an empty string.
    """
    values: dict[str, Any] = {}
    for field in schema.fields:
        if field.type == "multi-select":
            values[field.name] = []
        elif field.type == "switch":
            values[field.name] = False
        else:
            values[field.name] = ""
    return values


class FormClient:
    """Synchronous client for the dyn-form HTTP API."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Server URL. If None, uses config.server_url.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (used by tests).
        """
        config = get_config()
        self.base_url = (base_url or config.server_url).rstrip("/")
        self._http = httpx.Client(base_url=self.base_url, timeout=timeout, transport=transport)
        self._schema: FormSchema | None = None

    def __enter__(self) -> "FormClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def fetch_schema(self, refresh: bool = False) -> FormSchema:
        """
        Get the form schema, fetching it once and caching it.

        Args:
            refresh: Fetch again even if a schema is cached.
        """
        if self._schema is None or refresh:
            response = self._http.get("/api/form-schema")
            response.raise_for_status()
            self._schema = FormSchema.model_validate(response.json())
        return self._schema

    def validate(self, payload: dict[str, Any]) -> ValidationResult:
        """Validate a payload locally against the server's schema."""
        return validate(self.fetch_schema(), payload)

    def submit(self, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Validate locally, then post the submission.

        Args:
            payload: Values keyed by field name.

        Returns:
            The server's receipt: ``{"success": True, "id": ..., "createdAt": ...}``.

        Raises:
            SubmissionRejected: If local or server-side validation fails.
            httpx.HTTPStatusError: For other non-success responses.
        """
        result = self.validate(payload)
        if not result.is_valid:
            raise SubmissionRejected(
                "Submission failed validation",
                errors=result.to_error_dict(),
            )

        response = self._http.post("/api/submissions", json=payload)
        if response.status_code == 400:
            errors = response.json().get("errors", {})
            logger.warning(f"Server rejected submission: {errors}")
            raise SubmissionRejected(
                "Server rejected submission",
                errors=errors,
                status_code=response.status_code,
            )
        response.raise_for_status()
        return response.json()

    def _page_params(self, page: int, limit: int, sort_order: str) -> dict[str, Any]:
        return {"page": page, "limit": limit, "sortBy": "createdAt", "sortOrder": sort_order}

    def list_submissions(
        self,
        page: int = 1,
        limit: int = 10,
        sort_order: str = "desc",
    ) -> SubmissionPage:
        """Fetch one page of submissions sorted by creation time."""
        response = self._http.get(
            "/api/submissions",
            params=self._page_params(page, limit, sort_order),
        )
        response.raise_for_status()
        return SubmissionPage.model_validate(response.json())

    def export_csv(
        self,
        page: int = 1,
        limit: int = 10,
        sort_order: str = "desc",
    ) -> str:
        """Download one page of submissions as CSV text."""
        response = self._http.get(
            "/api/submissions/export.csv",
            params=self._page_params(page, limit, sort_order),
        )
        response.raise_for_status()
        return response.text

    def health(self) -> bool:
        """Whether the server answers its health check."""
        try:
            response = self._http.get("/api/health")
        except httpx.HTTPError as e:
            logger.debug(f"Health check failed: {e}")
            return False
        return response.status_code == 200 and bool(response.json().get("ok"))
