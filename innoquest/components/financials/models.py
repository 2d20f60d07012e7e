"""
Financial model component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FinancialsInput:
    """Input for the weekly cost and profit breakdown."""

    demand: int
    price: float
    margin_percentage: float
    rnd_cost: float = 0.0
    analytics_purchased: bool = False
    analytics_quantity: int | None = None  # None means one purchase
    profit_bonus_multiplier: float | None = None  # One-time admin grant


@dataclass(frozen=True)
class FinancialsOutput:
    """Weekly cost and profit breakdown."""

    revenue: float
    cogs_cost: float
    operating_cost: float
    rnd_cost: float
    analytics_cost: float
    total_costs: float
    profit: float  # Already floored at the minimum-loss floor
    profit_bonus_multiplier_applied: float | None = None
