"""
Decision intake.

Turns a raw decision payload (parsed JSON) into the engine's input and the
configuration it must run against.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from innoquest.api.schemas import DecisionRequest
from innoquest.components.weekly import WeeklyDecisionInput
from innoquest.domain.entities import GameConfiguration
from innoquest.domain.errors import InvalidConfiguration

logger = logging.getLogger(__name__)


def parse_decision(
    payload: dict[str, Any],
    config: GameConfiguration,
) -> tuple[WeeklyDecisionInput, GameConfiguration]:
    """
    Validate a decision payload.

    Returns:
        The decision and the configuration with game-level overrides applied

    Raises:
        InvalidConfiguration: If the payload does not match the schema
    """
    try:
        request = DecisionRequest.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        logger.warning("Decision payload rejected: %s", first["msg"])
        raise InvalidConfiguration(
            f"Invalid decision payload: {e}", code="invalid_input", field=field
        ) from e

    return request.to_decision_input(), config.with_overrides(**request.constant_overrides())
