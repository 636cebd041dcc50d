"""
Points Engine

Applies the scoring rules to a receipt and sums their contributions.

The engine is pure: no I/O, no shared state, and the same receipt always
scores the same. Every rule handles its own parse failures, so scoring
never raises for a well-formed Receipt model.

Usage:
    from core.points import calculate_points, score_breakdown

    points = calculate_points(receipt)
    for result in score_breakdown(receipt):
        print(result.rule_id, result.points)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from core.schemas.receipt import Receipt

from .rules import (
    afternoon_window_points,
    description_length_points,
    item_pair_points,
    odd_day_points,
    quarter_multiple_points,
    retailer_alphanumeric_points,
    round_dollar_points,
)


@dataclass(frozen=True)
class PointsRule:
    """A named scoring rule."""
    rule_id: str
    description: str
    apply: Callable[[Receipt], int]


@dataclass(frozen=True)
class RuleResult:
    """Points contributed by a single rule for one receipt."""
    rule_id: str
    description: str
    points: int


DEFAULT_RULES: tuple[PointsRule, ...] = (
    PointsRule(
        "retailer_alphanumeric",
        "One point for every alphanumeric character in the retailer name",
        retailer_alphanumeric_points,
    ),
    PointsRule(
        "round_dollar_total",
        "50 points if the total is a round dollar amount with no cents",
        round_dollar_points,
    ),
    PointsRule(
        "quarter_multiple_total",
        "25 points if the total is a multiple of 0.25",
        quarter_multiple_points,
    ),
    PointsRule(
        "item_pairs",
        "5 points for every two items on the receipt",
        item_pair_points,
    ),
    PointsRule(
        "description_length",
        "ceil(price * 0.2) for each item whose trimmed description length is a multiple of 3",
        description_length_points,
    ),
    PointsRule(
        "odd_purchase_day",
        "6 points if the day in the purchase date is odd",
        odd_day_points,
    ),
    PointsRule(
        "afternoon_purchase",
        "10 points if the purchase time is after 2:00pm and before 4:00pm",
        afternoon_window_points,
    ),
)


class PointsEngine:
    """Scores receipts against an ordered set of rules."""

    def __init__(self, rules: Sequence[PointsRule] = DEFAULT_RULES) -> None:
        self.rules: tuple[PointsRule, ...] = tuple(rules)

    def breakdown(self, receipt: Receipt) -> list[RuleResult]:
        """Return one result per rule, zero-point rules included."""
        return [
            RuleResult(
                rule_id=rule.rule_id,
                description=rule.description,
                points=rule.apply(receipt),
            )
            for rule in self.rules
        ]

    def calculate(self, receipt: Receipt) -> int:
        """Return the total points for a receipt."""
        return sum(result.points for result in self.breakdown(receipt))


_default_engine = PointsEngine()


def calculate_points(receipt: Receipt) -> int:
    """Score a receipt with the default rule set."""
    return _default_engine.calculate(receipt)


def score_breakdown(receipt: Receipt) -> list[RuleResult]:
    """Per-rule points for a receipt under the default rule set."""
    return _default_engine.breakdown(receipt)
