"""
Settlement component - team state after a weekly result.
"""

from .component import run, settle
from .models import SettleInput, SettleOutput, TeamSnapshot

__all__ = [
    "run",
    "settle",
    "SettleInput",
    "SettleOutput",
    "TeamSnapshot",
]
