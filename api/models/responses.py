"""
API Response Models

Pydantic models for API response serialization.
"""

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health endpoint."""

    ok: bool = True
    service: str = "receipt-points-api"
    version: str = "v1"


class ProcessReceiptResponse(BaseModel):
    """Response for POST /receipts/process."""

    id: str = Field(..., description="Identifier of the stored receipt")


class PointsResponse(BaseModel):
    """Response for GET /receipts/{id}/points."""

    points: int = Field(..., description="Points awarded to the receipt")


class ErrorDetail(BaseModel):
    """Detailed error information."""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Standard error response."""

    ok: bool = False
    error: ErrorDetail = Field(..., description="Error details")
