"""Balance rules: stat ranges, fusion recipes and battle rewards."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .tier import TierName


class StatRange(BaseModel):
    """Inclusive base range for one stat, before tier scaling."""
    min: int = Field(..., ge=0)
    max: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_order(self):
        if self.max < self.min:
            raise ValueError(f"max ({self.max}) is below min ({self.min})")
        return self

    def scaled(self, multiplier: float) -> tuple[int, int]:
        """Range scaled by a tier multiplier, rounded half-up."""
        return round_half_up(self.min * multiplier), round_half_up(self.max * multiplier)


class StatRanges(BaseModel):
    """Base ranges for every rolled stat. Field order is the draw order."""
    attack: StatRange
    defense: StatRange
    speed: StatRange
    health: StatRange

    model_config = ConfigDict(frozen=True)

    def items(self) -> list[tuple[str, StatRange]]:
        return [(name, getattr(self, name)) for name in ("attack", "defense", "speed", "health")]


class FusionRecipe(BaseModel):
    """What it takes to attempt a fusion into one tier."""
    target_tier: TierName
    material_count: int = Field(..., ge=1)
    min_material_tier: TierName
    cost: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)


class FusionRules(BaseModel):
    """Fusion success formula and recipes. Chances are percentages."""
    base_chance: float = 70.0
    per_rank_bonus: float = 5.0
    floor: float = Field(default=30.0, ge=0, le=100)
    ceiling: float = Field(default=95.0, ge=0, le=100)
    recipes: dict[TierName, FusionRecipe] = Field(default_factory=dict)
    material_values: dict[TierName, int] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class RewardRules(BaseModel):
    """Battle reward constants."""
    win_coins: int = 50
    loss_coins: int = 10
    coins_per_level: int = 5
    coins_per_level_gap: int = 10
    experience_ratio: float = 0.5
    win_item_chance: float = Field(default=0.3, ge=0, le=1)
    loss_item_chance: float = Field(default=0.1, ge=0, le=1)
    win_item: str = "premium_currency"
    loss_item: str = "healing_potion"

    model_config = ConfigDict(frozen=True)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values, like the game client does."""
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)
