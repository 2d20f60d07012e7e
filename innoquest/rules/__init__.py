"""
Rules - load and validate the game configuration.
"""

from .defaults import default_configuration
from .loader import (
    DEFAULT_RULES_PATH,
    RULES_PATH_ENV,
    load_rules,
    parse_rules,
    resolve_rules_path,
)
from .models import GameRules

__all__ = [
    "DEFAULT_RULES_PATH",
    "RULES_PATH_ENV",
    "GameRules",
    "default_configuration",
    "load_rules",
    "parse_rules",
    "resolve_rules_path",
]
