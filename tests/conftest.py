from pathlib import Path

import pytest

from innoquest.domain.entities import GameConfiguration
from innoquest.rules import default_configuration, load_rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def config() -> GameConfiguration:
    """Reference configuration built in code."""
    return default_configuration()


@pytest.fixture
def rules_path() -> Path:
    return PROJECT_ROOT / "innoquest_rules.yaml"


@pytest.fixture
def rules_config(rules_path: Path) -> GameConfiguration:
    """
    Configuration loaded from the REAL rules file at the project root.
    """
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")
    return load_rules(rules_path)
