"""
R&D resolver component.

Turns an optional R&D tier purchase into a tested/success outcome and the
demand multiplier it produces.

Rules:
- No tier: untested, neutral multiplier, no cost
- Tier: one Bernoulli trial at the tier's success rate; success applies the
  configured success factor, failure the configured failure penalty
- Tiers with admin roll ranges draw cost, success probability and success
  multiplier uniformly inside the ranges before the trial
- The tier cost is charged whatever the outcome
"""

from __future__ import annotations

import logging

from innoquest.core.ports.random import bernoulli, uniform
from innoquest.domain.entities import NEUTRAL_MULTIPLIER, GameConfiguration, RndTier
from innoquest.domain.numeric import round_half_up

from .models import ResolveRndInput, RndOutcome
from .ports import RandomPort

logger = logging.getLogger(__name__)

UNTESTED = RndOutcome(tested=False, success=False, multiplier=NEUTRAL_MULTIPLIER)


def _roll_parameters(
    tier: RndTier, config: GameConfiguration, rng: RandomPort
) -> tuple[float, float, float]:
    """Return (cost, success_probability, success_multiplier) for one test."""
    ranges = tier.ranges
    if ranges is None:
        return tier.cost, tier.success_rate, config.constants.rnd_success_multiplier

    cost = float(round_half_up(uniform(rng, ranges.min_cost, ranges.max_cost)))
    probability = uniform(rng, ranges.success_min, ranges.success_max) / 100
    multiplier = uniform(rng, ranges.multiplier_min, ranges.multiplier_max) / 100
    return cost, probability, multiplier


def resolve_rnd(
    tier_name: str | None,
    config: GameConfiguration,
    rng: RandomPort,
) -> RndOutcome:
    """
    Resolve this week's R&D test.

    Args:
        tier_name: Purchased tier, or None when no test was bought
        config: Game configuration holding the tier catalog
        rng: Random source for the trial

    Returns:
        RndOutcome with the multiplier to feed into demand

    Raises:
        InvalidConfiguration: If the tier is not in the catalog
    """
    if tier_name is None:
        return UNTESTED

    tier = config.rnd_tier(tier_name)
    cost, probability, success_multiplier = _roll_parameters(tier, config, rng)

    success = bernoulli(rng, probability)
    multiplier = success_multiplier if success else config.constants.rnd_failure_multiplier

    logger.debug(
        "R&D tier=%s probability=%.3f success=%s multiplier=%.3f cost=%.2f",
        tier.tier,
        probability,
        success,
        multiplier,
        cost,
    )

    return RndOutcome(
        tested=True,
        success=success,
        multiplier=multiplier,
        cost=cost,
        success_probability=probability,
    )


# --- Run Function (Atomic Component Pattern) ---


def run(
    inp: ResolveRndInput,
    *,
    config: GameConfiguration,
    rng: RandomPort,
) -> RndOutcome:
    """Main entry point for the R&D resolver component."""
    return resolve_rnd(inp.tier, config, rng)
