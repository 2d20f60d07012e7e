from innoquest.api.intake import parse_decision
from innoquest.api.schemas import DecisionRequest

__all__ = ["DecisionRequest", "parse_decision"]
