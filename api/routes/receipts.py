"""
Receipts Routes

Submit a receipt for scoring and look up the points for a stored receipt.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from api.deps import get_store
from api.errors import InvalidRequestError, ReceiptNotFoundAPIError
from api.models.responses import PointsResponse, ProcessReceiptResponse
from core.points import calculate_points
from core.schemas.errors import ReceiptNotFoundError
from core.schemas.receipt import Receipt
from core.store import ReceiptStore


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/receipts", tags=["receipts"])


def require_fields(receipt: Receipt) -> None:
    """Reject receipts with an empty retailer, total or item list."""
    missing = receipt.missing_fields()
    if missing:
        raise InvalidRequestError(
            "Missing required fields in receipt",
            details={"missing": missing},
        )


@router.post("/process", response_model=ProcessReceiptResponse)
async def process_receipt(
    receipt: Receipt,
    store: ReceiptStore = Depends(get_store),
) -> ProcessReceiptResponse:
    """
    Score a receipt and store the result.

    Returns the generated identifier; the receipt body itself is not kept.
    """
    require_fields(receipt)

    points = calculate_points(receipt)
    scored = store.add(points)
    logger.info(f"Processed receipt {scored.id} from {receipt.retailer!r}: {points} points")

    return ProcessReceiptResponse(id=scored.id)


@router.get("/{receipt_id}/points", response_model=PointsResponse)
async def get_receipt_points(
    receipt_id: str,
    store: ReceiptStore = Depends(get_store),
) -> PointsResponse:
    """Return the points awarded to a previously processed receipt."""
    try:
        points = store.get(receipt_id)
    except ReceiptNotFoundError:
        logger.info(f"Points lookup for unknown receipt {receipt_id}")
        raise ReceiptNotFoundAPIError(receipt_id)

    logger.info(f"Points for receipt {receipt_id}: {points}")
    return PointsResponse(points=points)
