from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from innoquest.components.weekly.models import WeeklyDecisionInput


# --- Decision Intake ---
class DecisionRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    product_id: int
    set_price: float = Field(gt=0, allow_inf_nan=False)
    rnd_tier: str | None = None
    analytics_purchased: bool = False
    analytics_quantity: int | None = Field(default=None, ge=0)
    # Game-level settings carried on every submission
    population_size: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    cost_per_analytics: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    current_customer_count: int = Field(default=0, ge=0)
    current_funding_stage: str
    successful_rnd_tests: int = Field(default=0, ge=0)
    avg_purchase_probability: float | None = Field(default=None, ge=0, le=1)
    bonus_multiplier_pending: float | None = Field(default=None, gt=0, allow_inf_nan=False)

    def to_decision_input(self) -> WeeklyDecisionInput:
        return WeeklyDecisionInput(
            product_id=self.product_id,
            set_price=self.set_price,
            current_funding_stage=self.current_funding_stage,
            rnd_tier=self.rnd_tier or None,
            analytics_purchased=self.analytics_purchased,
            analytics_quantity=self.analytics_quantity,
            current_customer_count=self.current_customer_count,
            successful_rnd_tests=self.successful_rnd_tests,
            avg_purchase_probability=self.avg_purchase_probability,
            profit_bonus_multiplier=self.bonus_multiplier_pending,
        )

    def constant_overrides(self) -> dict[str, Any]:
        """Game-level settings that replace configuration constants."""
        overrides: dict[str, Any] = {}
        if self.population_size is not None:
            overrides["base_market_size"] = self.population_size
        if self.cost_per_analytics is not None:
            overrides["analytics_cost"] = self.cost_per_analytics
        return overrides
