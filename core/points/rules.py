"""
Points Rules

The individual scoring rules. Each rule takes a Receipt and returns the
points it contributes. Rules that depend on a parsed field (total, price,
date, time) parse that field themselves and contribute 0 when it does not
parse, so one bad field never affects the other rules.

A rule awarding 5 points for totals above 10.00 is deliberately absent.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime, time
from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal, DecimalException, InvalidOperation
from typing import Optional

from core.schemas.receipt import Receipt


logger = logging.getLogger(__name__)


ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
DESCRIPTION_LENGTH_DIVISOR = 3
PRICE_MULTIPLIER = Decimal("0.2")
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10

# Half-open window [14:00, 16:00)
AFTERNOON_START = time(14, 0)
AFTERNOON_END = time(16, 0)

_AMOUNT_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_TIME_RE = re.compile(r"[0-9]{1,2}:[0-9]{2}")


# =============================================================================
# Field parsers
# =============================================================================

def parse_amount(text: str) -> Optional[Decimal]:
    """Parse a decimal amount such as '35.35'; None if it is not one."""
    if not _AMOUNT_RE.fullmatch(text):
        return None
    try:
        return Decimal(text)
    except InvalidOperation:
        return None


def parse_purchase_date(text: str) -> Optional[date]:
    """Parse a YYYY-MM-DD purchase date; None if invalid."""
    if not _DATE_RE.fullmatch(text):
        return None
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        return None


def parse_purchase_time(text: str) -> Optional[time]:
    """Parse a 24-hour HH:MM purchase time; None if invalid."""
    if not _TIME_RE.fullmatch(text):
        return None
    try:
        return datetime.strptime(text, "%H:%M").time()
    except ValueError:
        return None


# =============================================================================
# Rules
# =============================================================================

def retailer_alphanumeric_points(receipt: Receipt) -> int:
    """One point for every letter or digit in the retailer name."""
    return sum(1 for ch in receipt.retailer if ch.isalpha() or ch.isdecimal())


def round_dollar_points(receipt: Receipt) -> int:
    """50 points if the total has no cents."""
    total = parse_amount(receipt.total)
    if total is None:
        logger.debug(f"Skipping round-dollar rule, unparseable total {receipt.total!r}")
        return 0
    if total == total.to_integral_value(rounding=ROUND_DOWN):
        return ROUND_DOLLAR_POINTS
    return 0


def quarter_multiple_points(receipt: Receipt) -> int:
    """25 points if the total is a multiple of 0.25."""
    total = parse_amount(receipt.total)
    if total is None:
        logger.debug(f"Skipping quarter-multiple rule, unparseable total {receipt.total!r}")
        return 0
    try:
        cents = (total * 100).to_integral_value(rounding=ROUND_HALF_UP)
        is_multiple = cents % 25 == 0
    except DecimalException:
        logger.debug(f"Skipping quarter-multiple rule, total {receipt.total!r} out of range")
        return 0
    return QUARTER_MULTIPLE_POINTS if is_multiple else 0


def item_pair_points(receipt: Receipt) -> int:
    """5 points for every two items."""
    return (len(receipt.items) // 2) * ITEM_PAIR_POINTS


def description_length_points(receipt: Receipt) -> int:
    """
    For each item whose trimmed description length in UTF-8 bytes is a multiple of 3
    (including 0), award ceil(price * 0.2) points.

    Items with an unparseable price are skipped. A negative price awards
    nothing rather than subtracting.
    """
    points = 0
    for index, item in enumerate(receipt.items):
        if len(item.short_description.strip().encode("utf-8")) % DESCRIPTION_LENGTH_DIVISOR != 0:
            continue
        price = parse_amount(item.price)
        if price is None:
            logger.debug(f"Skipping item {index}, unparseable price {item.price!r}")
            continue
        try:
            points += max(0, math.ceil(price * PRICE_MULTIPLIER))
        except DecimalException:
            logger.debug(f"Skipping item {index}, price {item.price!r} out of range")
    return points


def odd_day_points(receipt: Receipt) -> int:
    """6 points if the day of the purchase date is odd."""
    purchased_on = parse_purchase_date(receipt.purchase_date)
    if purchased_on is None:
        logger.debug(f"Skipping odd-day rule, unparseable date {receipt.purchase_date!r}")
        return 0
    return ODD_DAY_POINTS if purchased_on.day % 2 == 1 else 0


def afternoon_window_points(receipt: Receipt) -> int:
    """10 points if the purchase time is in [14:00, 16:00)."""
    purchased_at = parse_purchase_time(receipt.purchase_time)
    if purchased_at is None:
        logger.debug(f"Skipping afternoon rule, unparseable time {receipt.purchase_time!r}")
        return 0
    if AFTERNOON_START <= purchased_at < AFTERNOON_END:
        return AFTERNOON_POINTS
    return 0
