"""
Financial model component.

Pure functions for revenue, costs and profit. Inputs are assumed validated
by the earlier steps; only a malformed profit bonus multiplier raises.
"""

from __future__ import annotations

import logging

from innoquest.domain.entities import EngineConstants
from innoquest.domain.errors import InvalidConfiguration
from innoquest.domain.numeric import is_finite_number, round_half_up

from .models import FinancialsInput, FinancialsOutput

logger = logging.getLogger(__name__)

# --- Pure Functions ---


def calculate_revenue(demand: int, price: float) -> float:
    return demand * price


def calculate_cogs(revenue: float, margin_percentage: float) -> float:
    """Cost of goods sold: the part of revenue not retained as margin."""
    return revenue * (1 - margin_percentage)


def calculate_operating_cost(demand: int, constants: EngineConstants) -> float:
    """Fixed base cost plus a per-unit logistics cost."""
    return constants.base_operating_cost + demand * constants.scalable_cost_per_unit


def calculate_analytics_cost(
    purchased: bool,
    constants: EngineConstants,
    quantity: int | None = None,
) -> float:
    if not purchased:
        return 0.0
    units = 1 if quantity is None else quantity
    return constants.analytics_cost * units


def apply_profit_bonus(profit: float, multiplier: float | None) -> float:
    """
    Scale profit by a one-time admin multiplier, rounded half up.

    Applied before the loss floor. Demand, revenue and funding are unaffected.
    """
    if multiplier is None:
        return profit
    if not is_finite_number(multiplier) or multiplier <= 0:
        raise InvalidConfiguration(
            f"profit_bonus_multiplier must be a positive number, got {multiplier!r}",
            code="invalid_input",
            field="profit_bonus_multiplier",
        )
    return float(round_half_up(profit * multiplier))


def apply_loss_floor(profit: float, constants: EngineConstants) -> float:
    return max(constants.minimum_loss_floor, profit)


def compute_financials(
    inp: FinancialsInput,
    constants: EngineConstants,
) -> FinancialsOutput:
    """
    Compute the weekly cost and profit breakdown.

    R&D cost is sunk: it is charged whether or not the test succeeded.
    A profit bonus multiplier scales profit before the minimum-loss floor,
    so profit is never reported below the floor.
    """
    revenue = calculate_revenue(inp.demand, inp.price)
    cogs = calculate_cogs(revenue, inp.margin_percentage)
    operating = calculate_operating_cost(inp.demand, constants)
    analytics = calculate_analytics_cost(
        inp.analytics_purchased, constants, inp.analytics_quantity
    )

    total_costs = cogs + operating + inp.rnd_cost + analytics
    profit = apply_profit_bonus(revenue - total_costs, inp.profit_bonus_multiplier)
    profit = apply_loss_floor(profit, constants)

    logger.debug(
        "Financials revenue=%.2f total_costs=%.2f profit=%.2f",
        revenue,
        total_costs,
        profit,
    )

    return FinancialsOutput(
        revenue=revenue,
        cogs_cost=cogs,
        operating_cost=operating,
        rnd_cost=inp.rnd_cost,
        analytics_cost=analytics,
        total_costs=total_costs,
        profit=profit,
        profit_bonus_multiplier_applied=inp.profit_bonus_multiplier,
    )


# --- Run Function (Atomic Component Pattern) ---


def run(inp: FinancialsInput, *, constants: EngineConstants) -> FinancialsOutput:
    """Main entry point for the financial model component."""
    return compute_financials(inp, constants)
