"""
Settlement component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from innoquest.components.weekly.models import WeeklyResult


@dataclass(frozen=True)
class TeamSnapshot:
    """The team fields a weekly result changes."""

    total_balance: float
    successful_rnd_tests: int
    funding_stage: str


@dataclass(frozen=True)
class SettleInput:
    team: TeamSnapshot
    result: WeeklyResult


@dataclass(frozen=True)
class SettleOutput:
    """Team state to persist, plus what changed."""

    team: TeamSnapshot
    balance_delta: float
    advanced: bool
