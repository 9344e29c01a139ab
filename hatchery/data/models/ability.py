"""Ability data model."""

from pydantic import BaseModel, ConfigDict, Field

from .affinity import AffinityName
from .tier import Tier, TierName


class Ability(BaseModel):
    """An ability a creature of a given type can roll."""
    id: str = Field(..., description="Unique identifier (lowercase, underscores)")
    name: str
    type: AffinityName
    power: int = Field(default=0, ge=0)
    min_tier: TierName = Tier.COMMON
    description: str = ""

    model_config = ConfigDict(frozen=True)
