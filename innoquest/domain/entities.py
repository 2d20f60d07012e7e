from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from innoquest.domain.errors import (
    InvalidConfiguration,
    unknown_funding_stage,
    unknown_product,
    unknown_rnd_tier,
)

# --- Enums / Literals ---
PassFailStatus = Literal["pass", "fail"]

NEUTRAL_MULTIPLIER = 1.0

# --- Catalog ---

class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    demand_multiplier: float = Field(gt=0)
    margin_percentage: float = Field(ge=0, le=1)

class RndTierRanges(BaseModel):
    """Admin-configured roll ranges. Success and multiplier are percentages."""

    model_config = ConfigDict(frozen=True)

    min_cost: float = Field(ge=0)
    max_cost: float = Field(ge=0)
    success_min: float = Field(ge=0, le=100)
    success_max: float = Field(ge=0, le=100)
    # Success multipliers always boost demand (above 100%)
    multiplier_min: float = Field(gt=100, allow_inf_nan=False)
    multiplier_max: float = Field(gt=100, allow_inf_nan=False)

    @model_validator(mode="after")
    def _ordered(self) -> "RndTierRanges":
        if self.min_cost > self.max_cost:
            raise ValueError("min_cost must not exceed max_cost")
        if self.success_min > self.success_max:
            raise ValueError("success_min must not exceed success_max")
        if self.multiplier_min > self.multiplier_max:
            raise ValueError("multiplier_min must not exceed multiplier_max")
        return self

class RndTier(BaseModel):
    model_config = ConfigDict(frozen=True)

    tier: str = Field(min_length=1)
    success_rate: float = Field(ge=0, le=1)
    cost: float = Field(ge=0)
    ranges: RndTierRanges | None = None

class FundingStage(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    revenue_threshold: float = Field(ge=0)
    demand_threshold: int = Field(ge=0)
    rnd_tests_threshold: int = Field(ge=0)
    bonus_multiplier: float = Field(default=1.0, ge=0)

# --- Constants ---

class EngineConstants(BaseModel):
    """Numeric constants shared by every weekly computation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    anchor_price: float = Field(default=99.0, gt=0)
    base_market_size: float = Field(default=3000.0, ge=0)
    price_multiplier_min: float = Field(default=0.5, ge=0)
    price_multiplier_max: float = Field(default=1.5, gt=0)
    base_operating_cost: float = Field(default=20000.0, ge=0)
    scalable_cost_per_unit: float = Field(default=0.5, ge=0)
    rnd_success_multiplier: float = Field(default=1.25, gt=1)
    rnd_failure_multiplier: float = Field(default=0.8, lt=1)
    analytics_cost: float = Field(default=2000.0, ge=0)
    bonus_rate: float = Field(default=0.05, ge=0)
    minimum_loss_floor: float = Field(default=-10000.0, le=0)

    @model_validator(mode="after")
    def _price_bounds(self) -> "EngineConstants":
        if self.price_multiplier_min > self.price_multiplier_max:
            raise ValueError("price_multiplier_min must not exceed price_multiplier_max")
        return self

# --- Configuration ---

class GameConfiguration(BaseModel):
    """
    Read-only catalog and constants for a game.

    Frozen so one instance can be shared by concurrent computations.
    """

    model_config = ConfigDict(frozen=True)

    products: dict[int, Product]
    rnd_tiers: dict[str, RndTier]
    funding_stages: tuple[FundingStage, ...]
    constants: EngineConstants = Field(default_factory=EngineConstants)

    @model_validator(mode="after")
    def _consistent(self) -> "GameConfiguration":
        for key, product in self.products.items():
            if key != product.id:
                raise ValueError(f"Product key {key} does not match id {product.id}")
        for key, tier in self.rnd_tiers.items():
            if key != tier.tier:
                raise ValueError(f"R&D tier key {key!r} does not match name {tier.tier!r}")
        if not self.funding_stages:
            raise ValueError("At least one funding stage is required")
        names = [stage.name for stage in self.funding_stages]
        if len(set(names)) != len(names):
            raise ValueError(f"Funding stage names must be unique: {names}")
        return self

    def product(self, product_id: int) -> Product:
        product = self.products.get(product_id)
        if product is None:
            raise unknown_product(product_id)
        return product

    def rnd_tier(self, name: str) -> RndTier:
        tier = self.rnd_tiers.get(name)
        if tier is None:
            raise unknown_rnd_tier(name)
        return tier

    def stage_index(self, name: str) -> int:
        for index, stage in enumerate(self.funding_stages):
            if stage.name == name:
                return index
        raise unknown_funding_stage(name)

    @property
    def stage_names(self) -> tuple[str, ...]:
        return tuple(stage.name for stage in self.funding_stages)

    def with_overrides(self, **constants: Any) -> "GameConfiguration":
        """Return a copy with some constants replaced (validated)."""
        if not constants:
            return self
        try:
            updated = EngineConstants.model_validate(
                {**self.constants.model_dump(), **constants}
            )
        except ValidationError as e:
            raise InvalidConfiguration(
                f"Invalid constant override: {e}", code="invalid_rules"
            ) from e
        return self.model_copy(update={"constants": updated})
