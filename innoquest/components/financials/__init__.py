"""
Financial model component.

Public API for the weekly cost and profit breakdown.
"""

from .component import (
    apply_loss_floor,
    apply_profit_bonus,
    calculate_analytics_cost,
    calculate_cogs,
    calculate_operating_cost,
    calculate_revenue,
    compute_financials,
    run,
)
from .models import FinancialsInput, FinancialsOutput

__all__ = [
    # Functions
    "apply_loss_floor",
    "apply_profit_bonus",
    "calculate_analytics_cost",
    "calculate_cogs",
    "calculate_operating_cost",
    "calculate_revenue",
    "compute_financials",
    "run",
    # Models
    "FinancialsInput",
    "FinancialsOutput",
]
