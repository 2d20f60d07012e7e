"""
Demand model component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from innoquest.domain.entities import NEUTRAL_MULTIPLIER


@dataclass(frozen=True)
class DemandInput:
    """Input for computing weekly unit demand."""

    product_id: int
    set_price: float
    rnd_multiplier: float = NEUTRAL_MULTIPLIER


@dataclass(frozen=True)
class DemandOutput:
    """Computed unit demand."""

    demand: int
    price_multiplier: float
