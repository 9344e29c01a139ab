"""
Egg-related API schemas.
"""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from hatchery.data.models import Creature, PreviewEntry, TierName

from .common import SeededRequest


class EggTypeSchema(BaseModel):
    """Egg type with its drop table."""

    id: str
    name: str
    description: str = ""
    weights: Dict[str, float]


class EggPreviewResponse(BaseModel):
    """Hatch odds for one egg."""

    egg_type: str
    pity_active: bool
    type_probability: float  # chance of each single type, percent
    entries: List[PreviewEntry]


class HatchRequest(SeededRequest):
    """Hatch request."""

    pity_counter: int = Field(default=0, ge=0)


class HatchResponse(BaseModel):
    """Hatched creature plus what is needed to replay the roll."""

    egg_type: str
    creature: Creature
    power: int
    seed: Optional[int] = None
    parity: bool = False
    pity_active: bool = False
    draws: int


class AuditTierSchema(BaseModel):
    """Observed vs expected odds for one tier."""

    tier: TierName
    count: int
    observed: float
    expected: float


class AuditResponse(BaseModel):
    """Hatch audit result."""

    egg_type: str
    samples: int
    seed: Optional[int] = None
    max_deviation: float
    tiers: List[AuditTierSchema]
