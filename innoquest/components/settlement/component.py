"""
Settlement component.

Projects a weekly result onto a team snapshot so the persistence
collaborator writes exactly what the engine decided:

- balance += profit, plus the bonus when the team qualifies to advance
- successful_rnd_tests += 1 when this week's R&D test succeeded
- funding_stage moves to the reported next stage when qualifying

Returns a new snapshot; the input is never mutated.
"""

from __future__ import annotations

from dataclasses import replace

from innoquest.components.weekly.models import WeeklyResult

from .models import SettleInput, SettleOutput, TeamSnapshot


def settle(team: TeamSnapshot, result: WeeklyResult) -> SettleOutput:
    delta = result.profit
    if result.qualifies_for_next_stage:
        delta += result.bonus

    updated = replace(
        team,
        total_balance=team.total_balance + delta,
        successful_rnd_tests=team.successful_rnd_tests + (1 if result.rnd_success else 0),
        funding_stage=(
            result.next_funding_stage if result.qualifies_for_next_stage else team.funding_stage
        ),
    )
    return SettleOutput(
        team=updated,
        balance_delta=delta,
        advanced=updated.funding_stage != team.funding_stage,
    )


def run(inp: SettleInput) -> SettleOutput:
    """Main entry point for the settlement component."""
    return settle(inp.team, inp.result)
