"""Fusion Resolver.

Fusing combines several creatures for a chance at one of a higher tier:

    chance = clamp(base + sum(material ranks) * per_rank_bonus, floor, ceiling)

The ceiling keeps fusion from ever being certain and the floor keeps it
from being hopeless. Requests that break the recipe are rejected before any
draw, so rejected calls leave no trace in a replayed stream.
"""

import logging
from typing import Sequence

from hatchery.core.rng import RandomDraw
from hatchery.core.tables import GameTables
from hatchery.data.models import (
    FusionMaterial,
    FusionOutcome,
    FusionPreview,
    FusionRecipe,
    FusionRequirements,
    Tier,
)
from hatchery.errors import InsufficientMaterialsError

logger = logging.getLogger(__name__)


class FusionResolver:
    """Fusion requirements, odds and rolls."""

    def __init__(self, tables: GameTables, draw: RandomDraw):
        self.tables = tables
        self.draw = draw

    @property
    def rules(self):
        return self.tables.fusion

    def calculate_requirements(self, target_tier: Tier) -> FusionRequirements:
        """
        Material count, minimum material tier and coin cost for a target tier.

        Raises:
            UnknownFusionTargetError: No recipe produces ``target_tier``.
        """
        recipe = self.tables.fusion_recipe(target_tier)
        return FusionRequirements(
            target_tier=recipe.target_tier,
            material_count=recipe.material_count,
            min_material_tier=recipe.min_material_tier,
            cost=recipe.cost,
        )

    def calculate_success(self, materials: Sequence[FusionMaterial], target_tier: Tier) -> float:
        """
        Success chance in percent, always within [floor, ceiling].

        The target tier selects no different formula; it is accepted so
        callers can pass the same arguments they pass to ``execute``.
        """
        rules = self.rules
        rank_total = sum(m.tier.rank for m in materials)
        chance = rules.base_chance + rank_total * rules.per_rank_bonus
        return max(rules.floor, min(chance, rules.ceiling))

    def material_value(self, materials: Sequence[FusionMaterial]) -> int:
        values = self.rules.material_values
        return sum(values.get(m.tier, 0) for m in materials)

    def check_materials(self, materials: Sequence[FusionMaterial], recipe: FusionRecipe) -> list[str]:
        """Every way ``materials`` fail ``recipe``; empty when they qualify."""
        problems = []
        ids = [m.id for m in materials]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            problems.append(f"materials listed more than once: {', '.join(duplicates)}")
        if len(set(ids)) < recipe.material_count:
            problems.append(
                f"{recipe.target_tier.name} fusion needs {recipe.material_count} materials, got {len(set(ids))}"
            )
        too_low = [m.id for m in materials if m.tier < recipe.min_material_tier]
        if too_low:
            problems.append(
                f"materials below {recipe.min_material_tier.name}: {', '.join(too_low)}"
            )
        return problems

    def preview(self, materials: Sequence[FusionMaterial], target_tier: Tier) -> FusionPreview:
        """Requirements, cost and odds without rolling."""
        recipe = self.tables.fusion_recipe(target_tier)
        problems = self.check_materials(materials, recipe)
        return FusionPreview(
            requirements=self.calculate_requirements(target_tier),
            success_chance=self.calculate_success(materials, target_tier),
            cost=recipe.cost,
            material_value=self.material_value(materials),
            meets_requirements=not problems,
            problems=problems,
        )

    def execute(self, materials: Sequence[FusionMaterial], target_tier: Tier) -> FusionOutcome:
        """
        Attempt a fusion.

        One uniform draw; the fusion succeeds when ``draw * 100`` is below the
        success chance. Materials are reported as consumed whether or not it
        succeeds; removing them from inventory is the caller's job.

        Raises:
            UnknownFusionTargetError: No recipe produces ``target_tier``.
            InsufficientMaterialsError: Materials break the recipe. Raised
                before any draw.
        """
        recipe = self.tables.fusion_recipe(target_tier)
        problems = self.check_materials(materials, recipe)
        if problems:
            raise InsufficientMaterialsError("; ".join(problems))

        chance = self.calculate_success(materials, target_tier)
        roll = self.draw.draw_uniform()
        success = roll * 100 < chance

        logger.debug(
            "Fusion into %s with %d materials: chance=%.1f roll=%.4f success=%s",
            recipe.target_tier.name,
            len(materials),
            chance,
            roll,
            success,
        )
        return FusionOutcome(
            success=success,
            target_tier=recipe.target_tier,
            result_tier=recipe.target_tier if success else None,
            success_chance=chance,
            roll=roll,
            consumed_material_ids=[m.id for m in materials],
        )
