"""
Funding evaluator component.

State machine over the configured, ordered funding stages. Transitions are
strictly forward and the last stage is terminal.

A team passes iff, for its *current* stage:
- revenue >= revenue_threshold
- demand >= demand_threshold
- successful_rnd_tests >= rnd_tests_threshold

A pass awards round(revenue x bonus_rate x stage.bonus_multiplier) and
reports the following stage; the terminal stage still passes and earns the
bonus but never qualifies for advancement. A fail awards nothing and keeps
the stage.
"""

from __future__ import annotations

import logging

from innoquest.domain.entities import FundingStage, GameConfiguration
from innoquest.domain.numeric import round_half_up

from .models import Criterion, FundingInput, FundingOutput

logger = logging.getLogger(__name__)

# --- Pure Functions ---


def find_shortfalls(
    stage: FundingStage,
    revenue: float,
    demand: int,
    successful_rnd_tests: int,
) -> tuple[Criterion, ...]:
    """Criteria of the stage the team did not meet (empty means pass)."""
    shortfalls: list[Criterion] = []
    if revenue < stage.revenue_threshold:
        shortfalls.append("revenue")
    if demand < stage.demand_threshold:
        shortfalls.append("demand")
    if successful_rnd_tests < stage.rnd_tests_threshold:
        shortfalls.append("rnd_tests")
    return tuple(shortfalls)


def next_stage_name(current_stage: str, config: GameConfiguration) -> str:
    """Following stage in the sequence, or the same stage when terminal."""
    index = config.stage_index(current_stage)
    if index == len(config.funding_stages) - 1:
        return current_stage
    return config.funding_stages[index + 1].name


def is_terminal(current_stage: str, config: GameConfiguration) -> bool:
    return config.stage_index(current_stage) == len(config.funding_stages) - 1


def evaluate_funding(
    current_stage: str,
    revenue: float,
    demand: int,
    successful_rnd_tests: int,
    config: GameConfiguration,
) -> FundingOutput:
    """
    Evaluate this week's performance against the current stage.

    Args:
        current_stage: Team's current funding stage name
        revenue: Week revenue
        demand: Week unit demand
        successful_rnd_tests: Team's cumulative successful R&D tests
        config: Game configuration holding the stage table

    Returns:
        FundingOutput with status, bonus and advisory next stage

    Raises:
        InvalidConfiguration: If the stage is not in the configured sequence
    """
    index = config.stage_index(current_stage)
    stage = config.funding_stages[index]
    shortfalls = find_shortfalls(stage, revenue, demand, successful_rnd_tests)

    if shortfalls:
        logger.debug("Funding stage=%s fail shortfalls=%s", current_stage, shortfalls)
        return FundingOutput(
            status="fail",
            qualifies_for_next_stage=False,
            bonus=0,
            current_stage=current_stage,
            next_stage=current_stage,
            shortfalls=shortfalls,
        )

    bonus = round_half_up(revenue * config.constants.bonus_rate * stage.bonus_multiplier)
    terminal = index == len(config.funding_stages) - 1
    next_stage = current_stage if terminal else config.funding_stages[index + 1].name

    logger.debug(
        "Funding stage=%s pass bonus=%d next_stage=%s",
        current_stage,
        bonus,
        next_stage,
    )

    return FundingOutput(
        status="pass",
        qualifies_for_next_stage=not terminal,
        bonus=bonus,
        current_stage=current_stage,
        next_stage=next_stage,
    )


# --- Run Function (Atomic Component Pattern) ---


def run(inp: FundingInput, *, config: GameConfiguration) -> FundingOutput:
    """Main entry point for the funding evaluator component."""
    return evaluate_funding(
        inp.current_stage,
        inp.revenue,
        inp.demand,
        inp.successful_rnd_tests,
        config,
    )
