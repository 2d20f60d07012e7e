"""
Engine error taxonomy.

Every rejection the engine can produce is an InvalidConfiguration: unknown
catalog references, malformed numeric input and unloadable rules. These are
data errors, so nothing here is retryable.
"""

from __future__ import annotations

from typing import Literal

ErrorCode = Literal[
    "unknown_product",
    "unknown_rnd_tier",
    "unknown_funding_stage",
    "invalid_input",
    "invalid_rules",
]


class InvalidConfiguration(ValueError):
    """Raised when a decision or configuration cannot be computed."""

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode = "invalid_input",
        field: str | None = None,
    ) -> None:
        self.code = code
        self.field = field
        super().__init__(message)


def unknown_product(product_id: int) -> InvalidConfiguration:
    return InvalidConfiguration(
        f"Invalid product ID: {product_id}",
        code="unknown_product",
        field="product_id",
    )


def unknown_rnd_tier(tier: str) -> InvalidConfiguration:
    return InvalidConfiguration(
        f"Invalid R&D tier: {tier}",
        code="unknown_rnd_tier",
        field="rnd_tier",
    )


def unknown_funding_stage(stage: str) -> InvalidConfiguration:
    return InvalidConfiguration(
        f"Unknown funding stage: {stage}",
        code="unknown_funding_stage",
        field="current_funding_stage",
    )
