"""
Points Module

Deterministic scoring of receipts.
"""

from .engine import (
    DEFAULT_RULES,
    PointsEngine,
    PointsRule,
    RuleResult,
    calculate_points,
    score_breakdown,
)

__all__ = [
    "DEFAULT_RULES",
    "PointsEngine",
    "PointsRule",
    "RuleResult",
    "calculate_points",
    "score_breakdown",
]
