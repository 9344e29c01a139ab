"""Affinity (elemental type) data model."""

from enum import StrEnum
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


class Affinity(StrEnum):
    """Elemental creature types."""
    FIRE = "FIRE"
    WATER = "WATER"
    EARTH = "EARTH"
    AIR = "AIR"
    LIGHT = "LIGHT"
    DARK = "DARK"

    @classmethod
    def parse(cls, value) -> "Affinity":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise ValueError(f"Unknown type: {value!r}")


AffinityName = Annotated[Affinity, BeforeValidator(Affinity.parse)]


class Advantage(StrEnum):
    """Outcome of a type-vs-type lookup."""
    STRONG = "strong"
    WEAK = "weak"
    NEUTRAL = "neutral"


class AffinityInfo(BaseModel):
    """Per-type configuration."""
    type: AffinityName
    name: str
    emoji: str = ""
    color: str = "#6B7280"
    species: str = Field(..., description="Second word of generated creature names")
    strong_against: tuple[AffinityName, ...] = ()
    weak_against: tuple[AffinityName, ...] = ()

    model_config = ConfigDict(frozen=True)
