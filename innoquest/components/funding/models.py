"""
Funding evaluator component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from innoquest.domain.entities import PassFailStatus

Criterion = Literal["revenue", "demand", "rnd_tests"]


@dataclass(frozen=True)
class FundingInput:
    """Input for evaluating a team against its current stage."""

    current_stage: str
    revenue: float
    demand: int
    successful_rnd_tests: int


@dataclass(frozen=True)
class FundingOutput:
    """
    Funding evaluation result.

    next_stage is advisory: the team record is owned by the caller.
    """

    status: PassFailStatus
    qualifies_for_next_stage: bool
    bonus: int
    current_stage: str
    next_stage: str
    shortfalls: tuple[Criterion, ...] = field(default_factory=tuple)
