"""Pydantic data models for the summary service.

These models define the shapes exchanged with callers of the summary
endpoint. Search results arrive from an upstream retrieval step and are
consumed read-only; they are deliberately permissive so that a caller's
extra fields pass through without rejecting the request.
"""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class SearchResultMetadata(BaseModel):
    """Optional descriptive metadata attached to a search hit.

    Attributes:
        title: Document or page title, rendered as ``Title:`` when present.
        section: Section heading, rendered as ``Section:`` when present.
    """

    model_config = ConfigDict(extra="ignore")

    title: Any = None
    section: Any = None


class SearchResult(BaseModel):
    """A single pre-fetched documentation snippet.

    ``score`` is only used for ordering and is accepted as-is; comparing
    scores of incompatible types fails at sort time, not here.
    Metadata that is not an object is treated as absent.
    """

    model_config = ConfigDict(extra="ignore")

    content: Any = None
    metadata: Optional[SearchResultMetadata] = None
    score: Any = None

    @field_validator("metadata", mode="before")
    @classmethod
    def _metadata_object_only(cls, value: Any) -> Any:
        if isinstance(value, (dict, SearchResultMetadata)):
            return value
        return None


class SummaryResponse(BaseModel):
    summary: str
    status: Literal["success"] = "success"


class ErrorDetails(BaseModel):
    """Debug information exposed only in development mode."""

    errorType: str
    kind: str
    stack: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
    status: Literal["error"] = "error"
    details: Optional[ErrorDetails] = None


class ValidationErrorResponse(BaseModel):
    error: str
