"""Immutable game tables.

All balance data the engine reads lives in one GameTables object that is
built and validated once, then injected into every engine. A table that
fails validation raises ConfigurationError; it is never patched up at
runtime.
"""

import logging
import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from hatchery.data.models import (
    Ability,
    Affinity,
    AffinityInfo,
    AffinityName,
    EggTable,
    FusionRecipe,
    FusionRules,
    PityRule,
    RewardRules,
    StatRanges,
    Tier,
    TierInfo,
    TierName,
)
from hatchery.errors import ConfigurationError, UnknownEggTypeError, UnknownFusionTargetError

logger = logging.getLogger(__name__)

# Drop tables are percentages
TABLE_TOTAL = 100.0
TOTAL_TOLERANCE = 1e-9


def weights_sum_to_total(weights: dict) -> bool:
    return math.isclose(sum(weights.values()), TABLE_TOTAL, rel_tol=0.0, abs_tol=TOTAL_TOLERANCE)


class GameTables(BaseModel):
    """Validated, frozen configuration for one engine."""
    tiers: dict[TierName, TierInfo]
    types: dict[AffinityName, AffinityInfo]
    eggs: dict[str, EggTable]
    abilities: dict[AffinityName, tuple[Ability, ...]]
    stat_ranges: StatRanges
    fusion: FusionRules
    pity: PityRule
    rewards: RewardRules = Field(default_factory=RewardRules)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameTables":
        """Build tables from plain data, reporting every problem as ConfigurationError."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid game tables: {e}") from e

    @model_validator(mode="after")
    def _validate_tables(self):
        problems: list[str] = []
        problems += _check_tiers(self.tiers)
        problems += _check_types(self.types)
        problems += _check_eggs(self.eggs)
        problems += _check_pity(self.pity)
        problems += _check_abilities(self.abilities)
        problems += _check_fusion(self.fusion)
        if problems:
            for problem in problems:
                logger.error("Game table problem: %s", problem)
            raise ConfigurationError("; ".join(problems))
        return self

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    @property
    def tier_order(self) -> list[Tier]:
        """Tiers from lowest to highest rank."""
        return sorted(self.tiers)

    @property
    def type_order(self) -> list[Affinity]:
        """Types in declaration order; uniform type draws index into this."""
        return list(self.types)

    def tier_info(self, tier: Tier) -> TierInfo:
        return self.tiers[tier]

    def stat_multiplier(self, tier: Tier) -> float:
        return self.tiers[tier].stat_multiplier

    def type_info(self, affinity: Affinity) -> AffinityInfo:
        return self.types[affinity]

    def egg(self, egg_type: str) -> EggTable:
        """Drop table for an egg type (case-insensitive)."""
        key = egg_type.strip().upper() if isinstance(egg_type, str) else egg_type
        table = self.eggs.get(key)
        if table is None:
            raise UnknownEggTypeError(egg_type)
        return table

    def hatch_weights(self, egg_type: str, pity_counter: int = 0) -> dict[Tier, float]:
        """
        Tier weights a hatch of ``egg_type`` uses.

        The pity table replaces the egg table once the pity counter reaches
        the configured threshold. Hatching and previewing both read this.

        Raises:
            UnknownEggTypeError: No table for ``egg_type``.
        """
        egg = self.egg(egg_type)
        if self.pity.applies(pity_counter):
            return dict(self.pity.weights)
        return dict(egg.weights)

    def abilities_for(self, affinity: Affinity, tier: Optional[Tier] = None) -> list[Ability]:
        """Ability pool of a type, limited to abilities unlocked at ``tier``."""
        pool = self.abilities.get(affinity, ())
        if tier is None:
            return list(pool)
        return [a for a in pool if a.min_tier <= tier]

    def fusion_recipe(self, target_tier: Tier) -> FusionRecipe:
        recipe = self.fusion.recipes.get(target_tier)
        if recipe is None:
            raise UnknownFusionTargetError(target_tier)
        return recipe


def _check_tiers(tiers: dict[Tier, TierInfo]) -> list[str]:
    problems = []
    missing = [t.name for t in Tier if t not in tiers]
    if missing:
        problems.append(f"tiers missing: {', '.join(missing)}")

    for tier, info in tiers.items():
        if info.tier != tier:
            problems.append(f"tier {tier.name} is keyed as {info.tier.name}")
        if info.rank != tier.rank:
            problems.append(f"tier {tier.name} has rank {info.rank}, expected {tier.rank}")

    ranks = sorted(info.rank for info in tiers.values())
    if ranks != list(range(len(ranks))):
        problems.append(f"tier ranks must be contiguous from 0, got {ranks}")

    previous = None
    for tier in sorted(tiers):
        multiplier = tiers[tier].stat_multiplier
        if previous is not None and multiplier < previous:
            problems.append(f"stat multiplier of {tier.name} ({multiplier}) is below the tier beneath it ({previous})")
        previous = multiplier
    return problems


def _check_types(types: dict[Affinity, AffinityInfo]) -> list[str]:
    problems = []
    missing = [a.value for a in Affinity if a not in types]
    if missing:
        problems.append(f"types missing: {', '.join(missing)}")

    for affinity, info in types.items():
        if info.type != affinity:
            problems.append(f"type {affinity.value} is keyed as {info.type.value}")
        if affinity in info.strong_against or affinity in info.weak_against:
            problems.append(f"type {affinity.value} has an advantage relation with itself")
        both = set(info.strong_against) & set(info.weak_against)
        if both:
            problems.append(
                f"type {affinity.value} is both strong and weak against {', '.join(sorted(both))}"
            )
        if len(set(info.strong_against)) != len(info.strong_against):
            problems.append(f"type {affinity.value} repeats a strength")
        if len(set(info.weak_against)) != len(info.weak_against):
            problems.append(f"type {affinity.value} repeats a weakness")
        for other in info.strong_against:
            other_info = types.get(other)
            if other_info is not None and affinity in other_info.strong_against:
                if affinity.value < other.value:
                    problems.append(f"types {affinity.value} and {other.value} are strong against each other")
    return problems


def _check_weights(label: str, weights: dict[Tier, float]) -> list[str]:
    problems = []
    negative = [t.name for t, w in weights.items() if w < 0]
    if negative:
        problems.append(f"{label} has negative weights for {', '.join(negative)}")
    if not weights_sum_to_total(weights):
        problems.append(f"{label} weights sum to {sum(weights.values())}, expected {TABLE_TOTAL:g}")
    return problems


def _check_eggs(eggs: dict[str, EggTable]) -> list[str]:
    problems = []
    if not eggs:
        problems.append("no egg types configured")
    for key, table in eggs.items():
        if key != table.id:
            problems.append(f"egg table {table.id} is keyed as {key}")
        if key != key.upper():
            problems.append(f"egg type id {key} must be upper case")
        problems += _check_weights(f"egg {key}", table.weights)
    return problems


def _check_pity(pity: PityRule) -> list[str]:
    return _check_weights("pity table", pity.weights)


def _check_abilities(abilities: dict[Affinity, tuple[Ability, ...]]) -> list[str]:
    problems = []
    lowest = min(Tier)
    seen: set[str] = set()
    for affinity in Affinity:
        pool = abilities.get(affinity, ())
        if not pool:
            problems.append(f"type {affinity.value} has an empty ability pool")
            continue
        if not any(a.min_tier == lowest for a in pool):
            problems.append(f"type {affinity.value} has no ability available at {lowest.name}")
        for ability in pool:
            if ability.type != affinity:
                problems.append(f"ability {ability.id} is {ability.type.value} but listed under {affinity.value}")
            if ability.id in seen:
                problems.append(f"ability id {ability.id} is used more than once")
            seen.add(ability.id)
    return problems


def _check_fusion(fusion: FusionRules) -> list[str]:
    problems = []
    if fusion.floor > fusion.ceiling:
        problems.append(f"fusion floor {fusion.floor} is above ceiling {fusion.ceiling}")
    for tier, recipe in fusion.recipes.items():
        if recipe.target_tier != tier:
            problems.append(f"fusion recipe for {recipe.target_tier.name} is keyed as {tier.name}")
        if recipe.min_material_tier >= tier:
            problems.append(f"fusion into {tier.name} accepts materials of {recipe.min_material_tier.name}")
    return problems
