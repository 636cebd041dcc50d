"""
Receipt Store

In-memory, thread-safe map from receipt id to awarded points.

Records are insert-only: an id is written once and never updated or
evicted. The store lives as long as the process.
"""

from __future__ import annotations

import logging
import threading
import uuid

from core.schemas.errors import DuplicateReceiptError, ReceiptNotFoundError
from core.schemas.receipt import ScoredReceipt


logger = logging.getLogger(__name__)


def generate_receipt_id() -> str:
    """Generate a fresh, URL-safe receipt id (random UUID4 text)."""
    return str(uuid.uuid4())


class ReceiptStore:
    """
    Concurrent-safe store of scored receipts.

    Usage:
        store = ReceiptStore()
        scored = store.add(points=28)
        store.get(scored.id)  # -> 28
    """

    def __init__(self) -> None:
        self._records: dict[str, ScoredReceipt] = {}
        self._lock = threading.Lock()

    def put(self, receipt_id: str, points: int) -> ScoredReceipt:
        """
        Insert a new record.

        Raises:
            DuplicateReceiptError: if the id is already stored.
        """
        record = ScoredReceipt(id=receipt_id, points=points)
        with self._lock:
            if receipt_id in self._records:
                raise DuplicateReceiptError(receipt_id)
            self._records[receipt_id] = record
        logger.debug(f"Stored receipt {receipt_id} ({points} points)")
        return record

    def add(self, points: int) -> ScoredReceipt:
        """Store points under a freshly generated id."""
        return self.put(generate_receipt_id(), points)

    def get(self, receipt_id: str) -> int:
        """
        Look up the points for an id.

        Raises:
            ReceiptNotFoundError: if the id was never stored.
        """
        with self._lock:
            record = self._records.get(receipt_id)
        if record is None:
            raise ReceiptNotFoundError(receipt_id)
        return record.points

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
