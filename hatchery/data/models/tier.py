"""Tier (rarity) data model."""

from enum import IntEnum
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer


class Tier(IntEnum):
    """Creature rarity tiers. The value is the tier's rank."""
    COMMON = 0
    UNCOMMON = 1
    RARE = 2
    EPIC = 3
    LEGENDARY = 4

    @classmethod
    def parse(cls, value) -> "Tier":
        """Accept a Tier, its name (any case) or its rank."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown tier: {value!r}") from None
        if isinstance(value, bool):
            raise ValueError(f"Unknown tier: {value!r}")
        return cls(value)

    @property
    def rank(self) -> int:
        return int(self.value)


# Tier field that reads names or ranks and writes names
TierName = Annotated[
    Tier,
    BeforeValidator(Tier.parse),
    PlainSerializer(lambda tier: tier.name, return_type=str),
]


class TierInfo(BaseModel):
    """Per-tier configuration."""
    tier: TierName
    rank: int = Field(..., ge=0, description="Must equal the tier's enum rank")
    name: str = Field(..., description="Display name")
    stat_multiplier: float = Field(..., ge=1.0)
    ability_slots: int = Field(default=1, ge=1, description="Abilities rolled at this tier")
    name_prefix: str = Field(..., description="First word of generated creature names")
    emoji: str = ""
    color: str = "#6B7280"

    model_config = ConfigDict(frozen=True)
