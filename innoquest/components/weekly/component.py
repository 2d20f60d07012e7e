"""
Weekly engine component.

Chains the four weekly steps:

    decision -> R&D resolver -> demand model -> financial model
             -> funding evaluator -> WeeklyResult

The whole decision is validated before any step runs, so a computation
either returns a complete result or raises InvalidConfiguration. Nothing
here touches team state; the caller persists the result.
"""

from __future__ import annotations

import logging
import math
import sys
from typing import Any

from innoquest.adapters.random_source import default_random_source
from innoquest.components.demand import compute_demand
from innoquest.components.financials import FinancialsInput, compute_financials
from innoquest.components.funding import evaluate_funding
from innoquest.components.rnd import resolve_rnd
from innoquest.core.ports.random import RandomPort
from innoquest.domain.entities import NEUTRAL_MULTIPLIER, GameConfiguration, Product
from innoquest.domain.errors import InvalidConfiguration
from innoquest.domain.numeric import is_finite_number

from .models import WeeklyDecisionInput, WeeklyResult

logger = logging.getLogger(__name__)

# --- Validation ---


def _invalid(field: str, message: str) -> InvalidConfiguration:
    return InvalidConfiguration(message, code="invalid_input", field=field)


def _require_count(value: Any, field: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise _invalid(field, f"{field} must be a non-negative integer, got {value!r}")


def _money_bound(
    decision: WeeklyDecisionInput, product: Product, config: GameConfiguration
) -> float:
    """Largest magnitude any money figure of this week can reach."""
    constants = config.constants
    tiers = config.rnd_tiers.values()
    boost = max(
        [NEUTRAL_MULTIPLIER, constants.rnd_success_multiplier]
        + [t.ranges.multiplier_max / 100 for t in tiers if t.ranges is not None]
    )
    units = (
        constants.base_market_size
        * product.demand_multiplier
        * constants.price_multiplier_max
        * boost
    )
    rnd_cost = max([0.0] + [t.ranges.max_cost if t.ranges else t.cost for t in tiers])
    quantity = 1 if decision.analytics_quantity is None else decision.analytics_quantity

    # Revenue and COGS are both bounded by peak revenue
    return (
        2 * decision.set_price * units
        + constants.base_operating_cost
        + units * constants.scalable_cost_per_unit
        + rnd_cost
        + constants.analytics_cost * quantity
    )


def validate_decision(decision: WeeklyDecisionInput, config: GameConfiguration) -> None:
    """
    Check a decision against the configuration.

    Raises:
        InvalidConfiguration: On the first unknown reference or malformed value
    """
    if isinstance(decision.product_id, bool) or not isinstance(decision.product_id, int):
        raise _invalid("product_id", f"product_id must be an integer, got {decision.product_id!r}")
    product = config.product(decision.product_id)

    if not is_finite_number(decision.set_price) or decision.set_price <= 0:
        raise _invalid("set_price", f"set_price must be a positive number, got {decision.set_price!r}")

    if decision.rnd_tier is not None:
        config.rnd_tier(decision.rnd_tier)

    if not isinstance(decision.analytics_purchased, bool):
        raise _invalid("analytics_purchased", "analytics_purchased must be a boolean")

    if decision.analytics_quantity is not None:
        _require_count(decision.analytics_quantity, "analytics_quantity")
        if decision.analytics_quantity > sys.float_info.max / max(
            config.constants.analytics_cost, 1.0
        ):
            raise _invalid("analytics_quantity", "analytics_quantity is too large")

    _require_count(decision.current_customer_count, "current_customer_count")
    _require_count(decision.successful_rnd_tests, "successful_rnd_tests")

    config.stage_index(decision.current_funding_stage)

    probability = decision.avg_purchase_probability
    if probability is not None and (
        not is_finite_number(probability) or not 0 <= probability <= 1
    ):
        raise _invalid(
            "avg_purchase_probability",
            f"avg_purchase_probability must be between 0 and 1, got {probability!r}",
        )

    bonus = decision.profit_bonus_multiplier
    if bonus is not None and (not is_finite_number(bonus) or bonus <= 0):
        raise _invalid(
            "profit_bonus_multiplier",
            f"profit_bonus_multiplier must be a positive number, got {bonus!r}",
        )

    # Every accepted decision must compute without overflowing
    bound = _money_bound(decision, product, config)
    stage_factor = max(
        [1.0]
        + [config.constants.bonus_rate * s.bonus_multiplier for s in config.funding_stages]
    )
    if not math.isfinite(bound * stage_factor):
        raise _invalid(
            "set_price",
            f"set_price {decision.set_price!r} is too large: weekly revenue would overflow",
        )
    if bonus is not None and not math.isfinite(bound * bonus):
        raise _invalid(
            "profit_bonus_multiplier",
            f"profit_bonus_multiplier {bonus!r} is too large: weekly profit would overflow",
        )


# --- Engine ---


def compute_weekly_result(
    decision: WeeklyDecisionInput,
    config: GameConfiguration,
    rng: RandomPort | None = None,
) -> WeeklyResult:
    """
    Compute one team's week.

    Args:
        decision: The team's decisions and current state
        config: Read-only game configuration
        rng: Random source for the R&D trial (system source if None)

    Returns:
        Complete WeeklyResult

    Raises:
        InvalidConfiguration: If the decision references unknown catalog
            entries or carries malformed numbers
    """
    try:
        validate_decision(decision, config)
    except InvalidConfiguration as e:
        logger.warning("Rejected weekly decision (%s): %s", e.code, e)
        raise

    if rng is None:
        rng = default_random_source
    product = config.product(decision.product_id)

    rnd = resolve_rnd(decision.rnd_tier, config, rng)

    demand = compute_demand(
        decision.product_id,
        decision.set_price,
        config,
        rnd_multiplier=rnd.multiplier,
    )

    financials = compute_financials(
        FinancialsInput(
            demand=demand.demand,
            price=decision.set_price,
            margin_percentage=product.margin_percentage,
            rnd_cost=rnd.cost,
            analytics_purchased=decision.analytics_purchased,
            analytics_quantity=decision.analytics_quantity,
            profit_bonus_multiplier=decision.profit_bonus_multiplier,
        ),
        config.constants,
    )

    # This week's success counts toward the thresholds it is evaluated on
    successful_tests = decision.successful_rnd_tests + (1 if rnd.success else 0)
    funding = evaluate_funding(
        decision.current_funding_stage,
        financials.revenue,
        demand.demand,
        successful_tests,
        config,
    )

    result = WeeklyResult(
        demand=demand.demand,
        revenue=financials.revenue,
        cogs_cost=financials.cogs_cost,
        operating_cost=financials.operating_cost,
        rnd_cost=financials.rnd_cost,
        analytics_cost=financials.analytics_cost,
        total_costs=financials.total_costs,
        profit=financials.profit,
        rnd_tested=rnd.tested,
        rnd_success=rnd.success,
        pass_fail_status=funding.status,
        bonus=funding.bonus,
        qualifies_for_next_stage=funding.qualifies_for_next_stage,
        next_funding_stage=funding.next_stage,
        price_multiplier=demand.price_multiplier,
        rnd_multiplier=rnd.multiplier,
        rnd_success_probability=rnd.success_probability,
        profit_bonus_multiplier_applied=financials.profit_bonus_multiplier_applied,
    )

    logger.info(
        "Weekly result product=%s stage=%s demand=%d revenue=%.2f profit=%.2f status=%s bonus=%d",
        decision.product_id,
        decision.current_funding_stage,
        result.demand,
        result.revenue,
        result.profit,
        result.pass_fail_status,
        result.bonus,
    )
    return result


def build_audit_record(
    decision: WeeklyDecisionInput,
    result: WeeklyResult,
) -> dict[str, Any]:
    """Input/output pair for the caller's append-only audit log."""
    return {
        "action": "weekly_decisions",
        "details": decision.to_dict(),
        "result": result.to_dict(),
    }


# --- Run Function (Atomic Component Pattern) ---


def run(
    inp: WeeklyDecisionInput,
    *,
    config: GameConfiguration,
    rng: RandomPort | None = None,
) -> WeeklyResult:
    """Main entry point for the weekly engine component."""
    return compute_weekly_result(inp, config, rng)
