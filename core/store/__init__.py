"""
Store Module

In-memory storage of scored receipts.
"""

from .receipt_store import ReceiptStore, generate_receipt_id

__all__ = [
    "ReceiptStore",
    "generate_receipt_id",
]
