"""
Common test fixtures shared by all modules.

Provides factory functions for receipt payloads and models:
- Item / Receipt models
- Raw JSON-ready payload dicts
- Well-known receipts with hand-verified point totals
"""

from typing import Any, Optional

from core.schemas.receipt import Item, Receipt


def make_item(description: str = "Gatorade", price: str = "2.25") -> Item:
    """Create an Item with sensible defaults."""
    return Item(short_description=description, price=price)


def make_receipt(
    *,
    retailer: str = "Target",
    purchase_date: str = "2022-01-02",
    purchase_time: str = "13:13",
    total: str = "1.23",
    items: Optional[list[Item]] = None,
) -> Receipt:
    """
    Create a Receipt whose defaults score only on the retailer rule.

    Defaults: even day, morning time, total with awkward cents, one item
    whose description length (8) is not a multiple of 3.
    """
    if items is None:
        items = [make_item()]
    return Receipt(
        retailer=retailer,
        purchase_date=purchase_date,
        purchase_time=purchase_time,
        total=total,
        items=items,
    )


def make_receipt_payload(**overrides: Any) -> dict[str, Any]:
    """Create a JSON-ready receipt body (camelCase keys)."""
    payload: dict[str, Any] = {
        "retailer": "Target",
        "purchaseDate": "2022-01-01",
        "purchaseTime": "13:01",
        "items": [
            {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
            {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
            {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
            {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
            {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
        ],
        "total": "35.35",
    }
    payload.update(overrides)
    return payload


# Target, 5 items, odd day:
#   6 retailer + 10 item pairs + 3 (Emils Cheese Pizza) + 3 (Klarbrunn) + 6 odd day
TARGET_RECEIPT_POINTS = 28


def make_corner_market_payload() -> dict[str, Any]:
    """Round-dollar total bought at 14:33."""
    return {
        "retailer": "M&M Corner Market",
        "purchaseDate": "2022-03-20",
        "purchaseTime": "14:33",
        "items": [
            {"shortDescription": "Gatorade", "price": "2.25"},
            {"shortDescription": "Gatorade", "price": "2.25"},
            {"shortDescription": "Gatorade", "price": "2.25"},
            {"shortDescription": "Gatorade", "price": "2.25"},
        ],
        "total": "9.00",
    }


#   14 retailer + 50 round dollar + 25 quarter + 10 item pairs + 10 afternoon
CORNER_MARKET_POINTS = 109
