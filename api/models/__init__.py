"""API response models."""

from api.models.responses import (
    HealthResponse,
    ProcessReceiptResponse,
    PointsResponse,
    ErrorDetail,
    ErrorResponse,
)

__all__ = [
    "HealthResponse",
    "ProcessReceiptResponse",
    "PointsResponse",
    "ErrorDetail",
    "ErrorResponse",
]
