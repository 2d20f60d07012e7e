"""
R&D resolver component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolveRndInput:
    """Input for resolving this week's R&D test."""

    tier: str | None = None  # None means no test purchased


@dataclass(frozen=True)
class RndOutcome:
    """
    Resolved R&D test.

    An untested outcome always has success=False, cost=0 and the neutral
    multiplier.
    """

    tested: bool
    success: bool
    multiplier: float
    cost: float = 0.0
    success_probability: float | None = None  # Probability actually rolled (0-1)
