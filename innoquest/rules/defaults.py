"""
Reference game configuration.

Mirrors innoquest_rules.yaml so the engine can run without a rules file
(tests, notebooks). Values are the game's reference parameters.
"""

from __future__ import annotations

from innoquest.domain.entities import (
    EngineConstants,
    FundingStage,
    GameConfiguration,
    Product,
    RndTier,
)

# (id, demand_multiplier, margin_percentage)
_PRODUCTS = [
    (1, 0.8, 0.65),
    (2, 0.9, 0.55),
    (3, 0.6, 0.70),
    (4, 0.7, 0.75),
    (5, 0.85, 0.50),
    (6, 0.75, 0.60),
    (7, 0.65, 0.72),
    (8, 0.95, 0.45),
    (9, 0.70, 0.68),
    (10, 0.75, 0.70),
]

# (tier, success_rate, cost)
_RND_TIERS = [
    ("basic", 0.7, 5000),
    ("standard", 0.8, 15000),
    ("advanced", 0.9, 35000),
    ("premium", 0.95, 60000),
]

# (name, revenue, demand, successful R&D tests)
_FUNDING_STAGES = [
    ("Pre-Seed", 100000, 1000, 0),
    ("Seed", 200000, 1500, 1),
    ("Series A", 350000, 2000, 3),
    ("Series B", 600000, 2500, 6),
    ("Series C", 1000000, 3000, 8),
]


def default_configuration() -> GameConfiguration:
    """Build the reference configuration."""
    return GameConfiguration(
        products={
            pid: Product(id=pid, demand_multiplier=dm, margin_percentage=margin)
            for pid, dm, margin in _PRODUCTS
        },
        rnd_tiers={
            name: RndTier(tier=name, success_rate=rate, cost=cost)
            for name, rate, cost in _RND_TIERS
        },
        funding_stages=tuple(
            FundingStage(
                name=name,
                revenue_threshold=revenue,
                demand_threshold=demand,
                rnd_tests_threshold=tests,
            )
            for name, revenue, demand, tests in _FUNDING_STAGES
        ),
        constants=EngineConstants(),
    )
