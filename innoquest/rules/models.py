from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from innoquest.domain.entities import (
    EngineConstants,
    FundingStage,
    GameConfiguration,
    Product,
    RndTier,
)


class GameRules(BaseModel):
    """Schema of the rules YAML file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: Literal[1]
    game_slug: str = Field(min_length=1)
    constants: EngineConstants = Field(default_factory=EngineConstants)
    products: list[Product] = Field(min_length=1)
    rnd_tiers: list[RndTier] = Field(default_factory=list)
    # Ordered: earliest stage first
    funding_stages: list[FundingStage] = Field(min_length=1)

    @model_validator(mode="after")
    def _unique_keys(self) -> "GameRules":
        ids = [p.id for p in self.products]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Duplicate product ids: {ids}")
        tiers = [t.tier for t in self.rnd_tiers]
        if len(set(tiers)) != len(tiers):
            raise ValueError(f"Duplicate R&D tier names: {tiers}")
        return self

    def to_configuration(self) -> GameConfiguration:
        return GameConfiguration(
            products={p.id: p for p in self.products},
            rnd_tiers={t.tier: t for t in self.rnd_tiers},
            funding_stages=tuple(self.funding_stages),
            constants=self.constants,
        )
