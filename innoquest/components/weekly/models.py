"""
Weekly engine component input/output models.

WeeklyDecisionInput is created per team per week by the decision-intake
collaborator and consumed exactly once. WeeklyResult is the immutable value
the caller persists and applies to the team.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from innoquest.domain.entities import PassFailStatus


@dataclass(frozen=True)
class WeeklyDecisionInput:
    """A team's decisions for one week plus the team state they apply to."""

    product_id: int
    set_price: float
    current_funding_stage: str
    rnd_tier: str | None = None
    analytics_purchased: bool = False
    analytics_quantity: int | None = None
    current_customer_count: int = 0
    successful_rnd_tests: int = 0
    # Caller-side fallback signal (0-1); not used by the formulas
    avg_purchase_probability: float | None = None
    profit_bonus_multiplier: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class WeeklyResult:
    """Outcome of one team's week."""

    demand: int
    revenue: float
    cogs_cost: float
    operating_cost: float
    rnd_cost: float
    analytics_cost: float
    total_costs: float
    profit: float
    rnd_tested: bool
    rnd_success: bool
    pass_fail_status: PassFailStatus
    bonus: int
    qualifies_for_next_stage: bool
    next_funding_stage: str
    price_multiplier: float
    rnd_multiplier: float
    rnd_success_probability: float | None = None
    profit_bonus_multiplier_applied: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
