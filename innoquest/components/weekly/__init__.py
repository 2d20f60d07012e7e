"""
Weekly engine component.

Public API for computing one team's week.
"""

from .component import (
    build_audit_record,
    compute_weekly_result,
    run,
    validate_decision,
)
from .models import WeeklyDecisionInput, WeeklyResult

__all__ = [
    # Functions
    "build_audit_record",
    "compute_weekly_result",
    "run",
    "validate_decision",
    # Models
    "WeeklyDecisionInput",
    "WeeklyResult",
]
