"""
Schemas

Public models and exceptions for receipts and their scores.
"""

from .receipt import REQUIRED_FIELDS, Item, Receipt, ScoredReceipt
from .errors import (
    DuplicateReceiptError,
    ErrorCodes,
    ReceiptNotFoundError,
    ReceiptPointsException,
)

__all__ = [
    "REQUIRED_FIELDS",
    "Item",
    "Receipt",
    "ScoredReceipt",
    "ErrorCodes",
    "ReceiptPointsException",
    "ReceiptNotFoundError",
    "DuplicateReceiptError",
]
