"""Creature instance data model."""

from typing import Optional

from pydantic import BaseModel, Field

from .affinity import AffinityName
from .tier import TierName


class CreatureStats(BaseModel):
    """Rolled base statistics."""
    attack: int = Field(..., ge=0)
    defense: int = Field(..., ge=0)
    speed: int = Field(..., ge=0)
    health: int = Field(..., ge=0)


class Creature(BaseModel):
    """A hatched creature. Owned and persisted by the caller, never by the engine."""
    id: Optional[str] = Field(default=None, description="Caller-assigned identifier")
    name: str = Field(..., description="Generated display name")
    tier: TierName
    type: AffinityName
    stats: CreatureStats
    abilities: list[str] = Field(..., min_length=1, description="Ability IDs, primary first")
    level: int = Field(default=1, ge=1)
