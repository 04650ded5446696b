"""Wire-level response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standardised error envelope returned for every translated failure."""

    status: int = Field(description="HTTP status code, repeated from the status line")
    code: str = Field(description="Machine-readable error identifier")
    title: str = Field(description="Human-readable error summary")
    details: Any | None = Field(
        default=None,
        description="Optional structured metadata describing the error context.",
    )
    path: str = Field(description="Request path that produced the error")
    timestamp: str = Field(description="ISO-8601 UTC time the error was rendered")
    request_id: str | None = Field(
        default=None,
        description="Correlation identifier assigned by the correlation middleware.",
    )


__all__ = ["ErrorResponse"]
