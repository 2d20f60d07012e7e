"""
Demand model component.

Public API for weekly unit demand.
"""

from .component import (
    compute_demand,
    estimate_demand_from_probability,
    price_multiplier,
    run,
)
from .models import DemandInput, DemandOutput

__all__ = [
    # Functions
    "compute_demand",
    "estimate_demand_from_probability",
    "price_multiplier",
    "run",
    # Models
    "DemandInput",
    "DemandOutput",
]
