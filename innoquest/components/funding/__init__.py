"""
Funding evaluator component.

Public API for funding-stage threshold evaluation.
"""

from .component import (
    evaluate_funding,
    find_shortfalls,
    is_terminal,
    next_stage_name,
    run,
)
from .models import Criterion, FundingInput, FundingOutput

__all__ = [
    # Functions
    "evaluate_funding",
    "find_shortfalls",
    "is_terminal",
    "next_stage_name",
    "run",
    # Models
    "Criterion",
    "FundingInput",
    "FundingOutput",
]
