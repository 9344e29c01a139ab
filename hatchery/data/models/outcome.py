"""Values returned by engine operations."""

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, Field

from .affinity import Advantage, AffinityName
from .tier import TierName


class BattleSide(StrEnum):
    ATTACKER = "attacker"
    DEFENDER = "defender"


class BattleOutcome(BaseModel):
    """Result of one battle resolution, with every number used to decide it."""
    winner: BattleSide
    critical: bool
    critical_roll: float
    attacker_power: int
    defender_power: int
    attacker_type: AffinityName
    defender_type: AffinityName
    advantage: Advantage
    multiplier: float
    attacker_adjusted_power: float
    margin: float = Field(..., ge=0, le=1)


class PreviewEntry(BaseModel):
    """One possible hatch result. ``type`` is None when any type can roll."""
    tier: TierName
    type: Optional[AffinityName] = None
    probability: float
    tier_name: str
    possible_types: list[AffinityName] = Field(default_factory=list)


class FusionRequirements(BaseModel):
    target_tier: TierName
    material_count: int
    min_material_tier: TierName
    cost: int


class FusionMaterial(BaseModel):
    """A creature offered as fusion input."""
    id: str
    tier: TierName


class FusionOutcome(BaseModel):
    success: bool
    target_tier: TierName
    result_tier: Optional[TierName] = None
    success_chance: float = Field(..., description="Percentage used for the roll")
    roll: float
    consumed_material_ids: list[str]


class FusionPreview(BaseModel):
    requirements: FusionRequirements
    success_chance: float
    cost: int
    material_value: int
    meets_requirements: bool
    problems: list[str] = Field(default_factory=list)


class RewardItem(BaseModel):
    type: str
    quantity: int = 1


class BattleRewards(BaseModel):
    coins: int
    experience: int
    items: list[RewardItem] = Field(default_factory=list)
