"""
Demand model component.

Pure functions turning a product, a price and the R&D multiplier into unit
demand.

demand = round(base_market_size x product.demand_multiplier
               x price_multiplier x rnd_multiplier)

price_multiplier is set_price / anchor_price clamped to the configured
bounds, so elasticity saturates beyond +/-50% of the anchor price.
"""

from __future__ import annotations

import logging

from innoquest.domain.entities import NEUTRAL_MULTIPLIER, EngineConstants, GameConfiguration
from innoquest.domain.numeric import clamp, round_half_up

from .models import DemandInput, DemandOutput

logger = logging.getLogger(__name__)

# --- Pure Functions ---


def price_multiplier(set_price: float, constants: EngineConstants) -> float:
    """Clamped ratio of the set price to the anchor price."""
    return clamp(
        set_price / constants.anchor_price,
        constants.price_multiplier_min,
        constants.price_multiplier_max,
    )


def compute_demand(
    product_id: int,
    set_price: float,
    config: GameConfiguration,
    rnd_multiplier: float = NEUTRAL_MULTIPLIER,
) -> DemandOutput:
    """
    Compute weekly unit demand.

    Args:
        product_id: Catalog product the team sells
        set_price: Price chosen by the team
        config: Game configuration
        rnd_multiplier: Multiplier from the R&D resolver

    Returns:
        DemandOutput with non-negative integer demand

    Raises:
        InvalidConfiguration: If the product is not in the catalog
    """
    product = config.product(product_id)
    constants = config.constants
    multiplier = price_multiplier(set_price, constants)

    raw = constants.base_market_size * product.demand_multiplier * multiplier * rnd_multiplier
    demand = max(0, round_half_up(raw))

    logger.debug(
        "Demand product=%s price=%.2f price_multiplier=%.3f rnd_multiplier=%.3f demand=%d",
        product_id,
        set_price,
        multiplier,
        rnd_multiplier,
        demand,
    )

    return DemandOutput(demand=demand, price_multiplier=multiplier)


def estimate_demand_from_probability(
    avg_purchase_probability: float,
    population_size: float,
) -> int:
    """
    Fallback demand estimate from an average purchase probability.

    The probability is a percentage (0-100) of the population expected to
    buy. Callers use this when they have customer-level data; the weekly
    engine itself never does.
    """
    return max(0, round_half_up(avg_purchase_probability * population_size / 100))


# --- Run Function (Atomic Component Pattern) ---


def run(inp: DemandInput, *, config: GameConfiguration) -> DemandOutput:
    """Main entry point for the demand model component."""
    return compute_demand(
        inp.product_id,
        inp.set_price,
        config,
        rnd_multiplier=inp.rnd_multiplier,
    )
