"""
Error Taxonomy

Stable error codes and the exception hierarchy shared by the store, the
points engine and the API layer.
"""

from typing import Any


class ErrorCodes:
    """Stable machine-readable error codes."""

    INVALID_REQUEST = "INVALID_REQUEST"
    RECEIPT_NOT_FOUND = "RECEIPT_NOT_FOUND"
    DUPLICATE_RECEIPT = "DUPLICATE_RECEIPT"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ReceiptPointsException(Exception):
    """
    Base exception for receipt-points errors.

    Carries a machine-readable code and structured details so callers at
    the HTTP boundary can translate it without parsing messages.
    """

    def __init__(
        self,
        message: str,
        code: str = "RECEIPT_POINTS_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class ReceiptNotFoundError(ReceiptPointsException):
    """Raised when a receipt id is unknown to the store."""

    def __init__(self, receipt_id: str) -> None:
        super().__init__(
            message=f"No receipt found for id {receipt_id!r}",
            code=ErrorCodes.RECEIPT_NOT_FOUND,
            details={"id": receipt_id},
        )
        self.receipt_id = receipt_id


class DuplicateReceiptError(ReceiptPointsException):
    """Raised when storing a receipt under an id that is already taken."""

    def __init__(self, receipt_id: str) -> None:
        super().__init__(
            message=f"Receipt id {receipt_id!r} is already stored",
            code=ErrorCodes.DUPLICATE_RECEIPT,
            details={"id": receipt_id},
        )
        self.receipt_id = receipt_id
