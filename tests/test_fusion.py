"""Tests for fusion."""

import pytest

from hatchery.core.engine import GameEngine
from hatchery.core.tables import GameTables
from hatchery.data.models import FusionMaterial, Tier
from hatchery.errors import InsufficientMaterialsError, UnknownFusionTargetError


def materials(*tiers):
    return [FusionMaterial(id=f"c{i}", tier=tier) for i, tier in enumerate(tiers)]


class TestFusionRequirements:
    """Tests for calculate_fusion_requirements."""

    @pytest.mark.parametrize("target,count,min_tier,cost", [
        (Tier.UNCOMMON, 2, Tier.COMMON, 100),
        (Tier.RARE, 3, Tier.UNCOMMON, 250),
        (Tier.EPIC, 3, Tier.RARE, 500),
        (Tier.LEGENDARY, 4, Tier.EPIC, 1000),
    ])
    def test_recipes(self, fixed_engine, target, count, min_tier, cost):
        requirements = fixed_engine().calculate_fusion_requirements(target)
        assert requirements.material_count == count
        assert requirements.min_material_tier == min_tier
        assert requirements.cost == cost

    def test_accepts_tier_name(self, fixed_engine):
        assert fixed_engine().calculate_fusion_requirements("epic").target_tier == Tier.EPIC

    def test_no_recipe(self, fixed_engine):
        with pytest.raises(UnknownFusionTargetError):
            fixed_engine().calculate_fusion_requirements(Tier.COMMON)


class TestFusionSuccess:
    """Tests for calculate_fusion_success."""

    def test_two_rares_into_epic(self, fixed_engine):
        chance = fixed_engine().calculate_fusion_success(materials(Tier.RARE, Tier.RARE), Tier.EPIC)
        assert chance == 90

    def test_clamped_to_ceiling(self, fixed_engine):
        chance = fixed_engine().calculate_fusion_success(
            materials(Tier.EPIC, Tier.EPIC, Tier.EPIC, Tier.EPIC), Tier.LEGENDARY
        )
        assert chance == 95

    def test_commons_use_base_chance(self, fixed_engine):
        chance = fixed_engine().calculate_fusion_success(materials(Tier.COMMON, Tier.COMMON), Tier.UNCOMMON)
        assert chance == 70

    def test_clamped_to_floor(self, table_data, fixed_stream):
        table_data["fusion"]["base_chance"] = 0
        engine = GameEngine(GameTables.from_dict(table_data), fixed_stream([]))
        assert engine.calculate_fusion_success(materials(Tier.COMMON, Tier.COMMON), Tier.UNCOMMON) == 30

    def test_chance_stays_in_bounds(self, fixed_engine):
        engine = fixed_engine()
        for tier in Tier:
            for count in range(0, 6):
                chance = engine.calculate_fusion_success(materials(*[tier] * count), Tier.LEGENDARY)
                assert 30 <= chance <= 95


class TestExecuteFusion:
    """Tests for execute_fusion."""

    def test_success(self, fixed_engine):
        engine = fixed_engine(0.5)
        outcome = engine.execute_fusion(materials(Tier.RARE, Tier.RARE, Tier.RARE), Tier.EPIC)

        assert outcome.success is True
        assert outcome.result_tier == Tier.EPIC
        assert outcome.success_chance == 95
        assert outcome.roll == 0.5
        assert outcome.consumed_material_ids == ["c0", "c1", "c2"]
        assert engine.draws == 1

    def test_failure_still_consumes(self, fixed_engine):
        outcome = fixed_engine(0.96).execute_fusion(materials(Tier.RARE, Tier.RARE, Tier.RARE), Tier.EPIC)

        assert outcome.success is False
        assert outcome.result_tier is None
        assert outcome.target_tier == Tier.EPIC
        assert outcome.consumed_material_ids == ["c0", "c1", "c2"]

    def test_extra_materials_allowed(self, fixed_engine):
        outcome = fixed_engine(0.1).execute_fusion(
            materials(Tier.COMMON, Tier.COMMON, Tier.UNCOMMON), Tier.UNCOMMON
        )
        assert outcome.success is True
        assert len(outcome.consumed_material_ids) == 3

    def test_too_few_materials(self, fixed_engine):
        engine = fixed_engine()
        with pytest.raises(InsufficientMaterialsError, match="needs 3"):
            engine.execute_fusion(materials(Tier.RARE, Tier.RARE), Tier.EPIC)
        assert engine.draws == 0

    def test_material_below_minimum(self, fixed_engine):
        engine = fixed_engine()
        with pytest.raises(InsufficientMaterialsError, match="c1"):
            engine.execute_fusion(materials(Tier.RARE, Tier.UNCOMMON, Tier.RARE), Tier.EPIC)
        assert engine.draws == 0

    def test_duplicate_materials(self, fixed_engine):
        engine = fixed_engine()
        same = [FusionMaterial(id="dup", tier=Tier.RARE)] * 3
        with pytest.raises(InsufficientMaterialsError, match="dup"):
            engine.execute_fusion(same, Tier.EPIC)
        assert engine.draws == 0

    def test_unknown_target(self, fixed_engine):
        engine = fixed_engine()
        with pytest.raises(UnknownFusionTargetError):
            engine.execute_fusion(materials(Tier.COMMON, Tier.COMMON), Tier.COMMON)
        assert engine.draws == 0


class TestPreviewFusion:
    """Tests for preview_fusion."""

    def test_preview_short_of_materials(self, fixed_engine):
        engine = fixed_engine()
        preview = engine.preview_fusion(materials(Tier.RARE, Tier.RARE), "EPIC")

        assert preview.success_chance == 90
        assert preview.cost == 500
        assert preview.material_value == 100
        assert preview.meets_requirements is False
        assert len(preview.problems) == 1
        assert engine.draws == 0

    def test_preview_ready(self, fixed_engine):
        preview = fixed_engine().preview_fusion(
            materials(Tier.EPIC, Tier.EPIC, Tier.EPIC, Tier.LEGENDARY), Tier.LEGENDARY
        )
        assert preview.meets_requirements is True
        assert preview.problems == []
        assert preview.material_value == 550
        assert preview.requirements.material_count == 4
