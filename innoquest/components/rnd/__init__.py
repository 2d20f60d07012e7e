"""
R&D resolver component.

Public API for resolving weekly R&D tests.
"""

from .component import UNTESTED, resolve_rnd, run
from .models import ResolveRndInput, RndOutcome
from .ports import RandomPort

__all__ = [
    # Functions
    "resolve_rnd",
    "run",
    # Models
    "ResolveRndInput",
    "RndOutcome",
    "UNTESTED",
    # Ports
    "RandomPort",
]
