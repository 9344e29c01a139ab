"""
Battle-related API schemas.
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from hatchery.data.models import BattleOutcome, BattleRewards, Creature

from .common import SeededRequest


class ResolveBattleRequest(SeededRequest):
    """Battle between two rosters."""

    attackers: List[Creature]
    defenders: List[Creature]


class ResolveBattleResponse(BaseModel):
    """Battle result."""

    outcome: BattleOutcome
    seed: Optional[int] = None
    parity: bool = False


class BattleRewardsRequest(SeededRequest):
    """Reward calculation request."""

    won: bool
    player_level: int = Field(default=1, ge=1)
    opponent_level: int = Field(default=1, ge=1)


class BattleRewardsResponse(BaseModel):
    """Rewards for one battle."""

    rewards: BattleRewards
    seed: Optional[int] = None


class PowerRequest(BaseModel):
    """Power calculation request."""

    creature: Creature


class PowerResponse(BaseModel):
    """Creature power breakdown."""

    power: int
    tier_multiplier: float
    level_factor: float
