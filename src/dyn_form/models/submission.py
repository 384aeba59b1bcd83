"""
Stored submission models.

Records are persisted and served with camelCase keys (``createdAt``,
``totalPages``) so the JSON file and the HTTP responses share one shape.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SubmissionRecord(BaseModel):
    """One accepted submission."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Unique submission identifier")
    created_at: str = Field(..., alias="createdAt", description="ISO-8601 UTC creation time")
    data: dict[str, Any] = Field(default_factory=dict, description="Accepted payload")

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class SubmissionPage(BaseModel):
    """One page of submissions, as returned by the listing endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    page: int
    limit: int
    total: int
    total_pages: int = Field(..., alias="totalPages")
    items: list[SubmissionRecord] = Field(default_factory=list)

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
