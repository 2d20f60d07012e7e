"""
Rules loader for the InnoQuest engine.

Reads the game configuration YAML and validates it with fail-fast behavior:
a configuration that does not validate must never reach the engine.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from innoquest.domain.entities import GameConfiguration
from innoquest.domain.errors import InvalidConfiguration
from innoquest.rules.models import GameRules

logger = logging.getLogger(__name__)

# Default rules file path (relative to project root)
DEFAULT_RULES_PATH = "innoquest_rules.yaml"

RULES_PATH_ENV = "INNOQUEST_RULES_PATH"


def _find_project_root() -> Path:
    """Find project root by looking for marker files."""
    current = Path.cwd()

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return current


def resolve_rules_path(path: Path | str | None = None) -> Path:
    """Explicit path, then $INNOQUEST_RULES_PATH, then the project root file."""
    if path is not None:
        return Path(path)

    env_path = os.environ.get(RULES_PATH_ENV)
    if env_path:
        return Path(env_path)

    return _find_project_root() / DEFAULT_RULES_PATH


def parse_rules(data: Any) -> GameConfiguration:
    """
    Validate an already-parsed rules mapping.

    Raises:
        InvalidConfiguration: If the mapping does not match the schema.
    """
    if not isinstance(data, dict):
        raise InvalidConfiguration(
            "Rules document must be a mapping", code="invalid_rules"
        )

    try:
        return GameRules.model_validate(data).to_configuration()
    except ValidationError as e:
        raise InvalidConfiguration(
            f"Rules validation failed:\n{e}", code="invalid_rules"
        ) from e


def load_rules(path: Path | str | None = None) -> GameConfiguration:
    """
    Load and validate the rules file.

    Raises FileNotFoundError if file missing.
    Raises InvalidConfiguration if the YAML or the schema is invalid.
    """
    rules_path = resolve_rules_path(path)
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules file not found at: {rules_path}")

    with open(rules_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidConfiguration(
                f"Invalid YAML syntax in rules file: {e}", code="invalid_rules"
            ) from e

    config = parse_rules(data)
    logger.info(
        "Loaded rules from %s (%d products, %d R&D tiers, %d funding stages)",
        rules_path,
        len(config.products),
        len(config.rnd_tiers),
        len(config.funding_stages),
    )
    return config
