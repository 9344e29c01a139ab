"""Egg drop-table data model."""

from pydantic import BaseModel, ConfigDict, Field

from .tier import TierName


class EggTable(BaseModel):
    """Drop rates for one egg type, as tier -> percentage.

    Declaration order of ``weights`` is significant: weighted draws break
    ties by it.
    """
    id: str = Field(..., description="Egg type identifier, e.g. BASIC")
    name: str = Field(..., description="Display name")
    weights: dict[TierName, float] = Field(..., min_length=1)
    description: str = ""

    model_config = ConfigDict(frozen=True)

    @property
    def total_weight(self) -> float:
        return sum(self.weights.values())

    def categories(self) -> list[tuple]:
        """Weights as an ordered (tier, weight) list."""
        return list(self.weights.items())


class PityRule(BaseModel):
    """Replaces the egg table after a long streak of hatches without a high-tier pull.

    ``threshold`` is compared with the caller's pity counter (hatches since
    the last qualifying pull).
    """
    enabled: bool = True
    threshold: int = Field(default=49, ge=1)
    weights: dict[TierName, float] = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)

    def applies(self, pity_counter: int) -> bool:
        return self.enabled and pity_counter >= self.threshold
