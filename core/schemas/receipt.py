"""
Receipt Schemas

Pydantic models for the receipt document accepted by the service and the
scored record kept in the store.

Wire keys are camelCase (``purchaseDate``, ``shortDescription``); Python
attributes are snake_case. Every field defaults to empty so that presence
checks happen at the request boundary, not during decoding.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# Fields that must be non-empty for a receipt to be accepted.
REQUIRED_FIELDS = ("retailer", "total", "items")


class Item(BaseModel):
    """A single line item on a receipt."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    short_description: str = Field(
        default="",
        alias="shortDescription",
        description="Short product description as printed on the receipt",
    )
    price: str = Field(
        default="",
        description="Item price as a decimal string (e.g. '6.49')",
    )


class Receipt(BaseModel):
    """
    A retail purchase submitted for scoring.

    Date, time and amounts stay as strings: the scoring rules parse them
    individually and skip themselves when a value does not parse.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    retailer: str = Field(
        default="",
        description="Retailer or store name",
    )
    purchase_date: str = Field(
        default="",
        alias="purchaseDate",
        description="Purchase date, YYYY-MM-DD",
    )
    purchase_time: str = Field(
        default="",
        alias="purchaseTime",
        description="Purchase time, 24-hour HH:MM",
    )
    items: list[Item] = Field(
        default_factory=list,
        description="Purchased items in receipt order",
    )
    total: str = Field(
        default="",
        description="Total amount paid as a decimal string",
    )

    def missing_fields(self) -> list[str]:
        """Return the required fields that are empty, in declaration order."""
        return [name for name in REQUIRED_FIELDS if not getattr(self, name)]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()


class ScoredReceipt(BaseModel):
    """The stored result of scoring one receipt submission."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(
        ...,
        min_length=1,
        description="Opaque identifier returned to the client",
    )
    points: int = Field(
        ...,
        description="Points awarded to the receipt",
    )
